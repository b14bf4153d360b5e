# Routes package init
"""
VideoGame API - API Routes Package
====================================

Route Inventory:
    - videogames.py:  /api/videogame          (catalog CRUD, projections, filters)
    - health.py:      GET /health             (service health check)

Routes stay thin: extract request data, call the service, choose the
status code. Storage access lives in app/services.
"""
