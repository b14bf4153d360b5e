# Services package init
"""
VideoGame API - Services Layer
================================

What:  Data-access layer sitting between routes (HTTP) and the database.

Service Inventory:
    - VideoGameService: list/get/project/filter/create/update/delete for the catalog

Services can be unit-tested with a mocked AsyncSession, without HTTP.
"""
