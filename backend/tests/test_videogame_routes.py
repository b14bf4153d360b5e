"""
VideoGame API - Endpoint Tests
================================

What:  HTTP-level tests for /api/videogame and /health.
How:   HTTPX AsyncClient over ASGITransport; each test starts from a fresh
       SQLite catalog holding the three seed records (ids 1-3).
"""

import pytest

BASE = "/api/videogame"


class TestQueries:

    @pytest.mark.asyncio
    async def test_list_returns_exactly_the_seed_records(self, test_client):
        response = await test_client.get(BASE)

        assert response.status_code == 200
        games = response.json()
        assert sorted(game["id"] for game in games) == [1, 2, 3]
        assert set(games[0]) == {"id", "title", "platform", "developer", "publisher"}

    @pytest.mark.asyncio
    async def test_get_by_id(self, test_client):
        response = await test_client.get(f"{BASE}/1")

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "title": "Spider-Man 2",
            "platform": "PS5",
            "developer": "Insomniac Games",
            "publisher": "Sony Interactive Entertainment",
        }

    @pytest.mark.asyncio
    async def test_get_unknown_id_is_404(self, test_client):
        response = await test_client.get(f"{BASE}/999")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["request_id"]

    @pytest.mark.asyncio
    async def test_non_integer_id_is_400(self, test_client):
        response = await test_client.get(f"{BASE}/abc")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/titles", {"Spider-Man 2", "The Legend of Zelda: Breath of the Wild", "CyberPunk 2077"}),
            ("/developer", {"Insomniac Games", "Nintendo EPD", "CD Projekt Red"}),
            ("/publisher", {"Sony Interactive Entertainment", "Nintendo", "CD Projekt"}),
        ],
    )
    async def test_projections(self, test_client, path, expected):
        response = await test_client.get(BASE + path)

        assert response.status_code == 200
        assert set(response.json()) == expected

    @pytest.mark.asyncio
    async def test_projection_is_not_deduplicated(self, test_client):
        await test_client.post(BASE, json={"title": "Other", "developer": "Nintendo EPD"})

        response = await test_client.get(f"{BASE}/developer")

        assert response.json().count("Nintendo EPD") == 2

    @pytest.mark.asyncio
    async def test_platform_filter_is_case_insensitive(self, test_client):
        response = await test_client.get(f"{BASE}/platform/ps5")

        assert response.status_code == 200
        assert [game["id"] for game in response.json()] == [1]

    @pytest.mark.asyncio
    async def test_developer_filter_with_spaces(self, test_client):
        response = await test_client.get(f"{BASE}/developers/CD%20PROJEKT%20RED")

        assert response.status_code == 200
        assert response.json()[0]["title"] == "CyberPunk 2077"

    @pytest.mark.asyncio
    async def test_list_accepts_trailing_slash(self, test_client):
        response = await test_client.get(f"{BASE}/")

        assert response.status_code == 200
        assert len(response.json()) == 3

    @pytest.mark.asyncio
    async def test_filters_fold_non_ascii_case(self, test_client):
        await test_client.post(BASE, json={"title": "Rallye", "platform": "ÉLITE",
                                           "developer": "Überstudio"})

        by_platform = await test_client.get(f"{BASE}/platform/élite")
        by_developer = await test_client.get(f"{BASE}/developers/überstudio")

        assert by_platform.status_code == 200
        assert [game["title"] for game in by_platform.json()] == ["Rallye"]
        assert by_developer.status_code == 200
        assert [game["title"] for game in by_developer.json()] == ["Rallye"]

    @pytest.mark.asyncio
    async def test_filter_without_matches_is_404(self, test_client):
        assert (await test_client.get(f"{BASE}/platform/Dreamcast")).status_code == 404
        assert (await test_client.get(f"{BASE}/developers/Sega")).status_code == 404


class TestMutations:

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, test_client):
        payload = {"title": "Hades", "platform": "PC", "developer": "Supergiant Games",
                   "publisher": "Supergiant Games"}

        created = await test_client.post(BASE, json=payload)

        assert created.status_code == 201
        body = created.json()
        assert body["id"] == 4
        assert created.headers["location"].endswith(f"{BASE}/4")

        fetched = await test_client.get(f"{BASE}/4")
        assert fetched.json() == {"id": 4, **payload}

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, test_client):
        response = await test_client.post(BASE, json={"id": 1, "title": "X"})

        assert response.status_code == 201
        assert response.json()["id"] == 4

    @pytest.mark.asyncio
    async def test_create_without_body_is_400(self, test_client):
        response = await test_client.post(BASE)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_create_with_malformed_body_is_400(self, test_client):
        response = await test_client.post(
            BASE, content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_returns_204_and_overwrites(self, test_client):
        response = await test_client.put(f"{BASE}/3", json={"id": 3, "title": "Cyberpunk 2077",
                                                            "platform": "PS5"})

        assert response.status_code == 204
        assert response.content == b""
        game = (await test_client.get(f"{BASE}/3")).json()
        assert game == {"id": 3, "title": "Cyberpunk 2077", "platform": "PS5",
                        "developer": None, "publisher": None}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path_id", [1, 999])
    async def test_update_id_mismatch_is_400_whether_or_not_row_exists(self, test_client, path_id):
        response = await test_client.put(f"{BASE}/{path_id}", json={"id": 2, "title": "Y"})

        assert response.status_code == 400
        assert response.json()["error"] == "id_mismatch"

    @pytest.mark.asyncio
    async def test_update_unknown_id_is_404(self, test_client):
        response = await test_client.put(f"{BASE}/999", json={"id": 999, "title": "Y"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_create_accepts_trailing_slash(self, test_client):
        response = await test_client.post(f"{BASE}/", json={"title": "X"})

        assert response.status_code == 201
        assert response.json()["id"] == 4
        assert response.headers["location"].endswith(f"{BASE}/4")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_id_beyond_integer_column_is_404(self, test_client, method):
        huge_id = 99999999999999999999
        body = {"id": huge_id, "title": "Y"} if method == "PUT" else None

        response = await test_client.request(method, f"{BASE}/{huge_id}", json=body)

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_id_beyond_integer_column_with_mismatch_is_400(self, test_client):
        response = await test_client.put(f"{BASE}/99999999999999999999", json={"id": 1, "title": "Y"})

        assert response.status_code == 400
        assert response.json()["error"] == "id_mismatch"

    @pytest.mark.asyncio
    async def test_delete_returns_record_then_404(self, test_client):
        response = await test_client.delete(f"{BASE}/2")

        assert response.status_code == 200
        assert response.json()["title"] == "The Legend of Zelda: Breath of the Wild"
        assert (await test_client.get(f"{BASE}/2")).status_code == 404
        assert (await test_client.delete(f"{BASE}/2")).status_code == 404

    @pytest.mark.asyncio
    async def test_full_scenario(self, test_client):
        games = (await test_client.get(BASE)).json()
        assert len(games) == 3

        created = await test_client.post(BASE, json={"title": "X"})
        assert created.json()["id"] == 4

        assert (await test_client.put(f"{BASE}/4", json={"id": 4, "title": "Y"})).status_code == 204
        assert (await test_client.get(f"{BASE}/4")).json()["title"] == "Y"

        assert (await test_client.delete(f"{BASE}/4")).status_code == 200
        assert (await test_client.get(f"{BASE}/4")).status_code == 404


class TestServiceEndpoints:

    @pytest.mark.asyncio
    async def test_health_reports_connected_database(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get(BASE, headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get(f"{BASE}/999")

        rid = response.headers["X-Request-ID"]
        assert len(rid) == 8
        assert response.json()["request_id"] == rid
