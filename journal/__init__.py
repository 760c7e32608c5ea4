"""
Journal Backend — Application Package Initializer
==================================================

What: Marks the `journal` directory as a Python package.
Who:  Imported by uvicorn (`journal.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Repositories (data access)      │  ← one store operation per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database / FileService (stores)   │  ← injected, app-owned clients
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
