"""
Case API: Application Package Initializer
===========================================

What: Marks the `case_api` directory as a Python package.
Who:  Used by Alembic, pytest, and uvicorn (`uvicorn case_api.main:app`).

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │    Services (Validation, Dispatch)  │  ← Defaults, search branching
    ├─────────────────────────────────────┤
    │   Repositories (Store Contract)     │  ← One query per operation
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly; services never build HTTP
    responses. Each request runs exactly one repository call.
"""

__version__ = "1.0.0"
