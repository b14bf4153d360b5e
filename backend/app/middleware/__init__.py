# Middleware package init
"""
VideoGame API - Middleware Package
====================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate (or accept) the correlation id first
    2. Logging: Log the request with that id and the final status/duration
    3. GZip / CORS: Framework middleware registered in main.py
"""
