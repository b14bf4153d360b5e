"""
VideoGame API - Application Package Initializer
=================================================

What: Marks the `app` directory as a Python package.
Who:  Imported by uvicorn (app.main:app), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, paths, status codes
    ├─────────────────────────────────────┤
    │     Services (Data Access)          │  ← One statement per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy table + Pydantic contracts
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
