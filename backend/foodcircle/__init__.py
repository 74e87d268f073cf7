"""
Food Circle Backend — Application Package Initializer
======================================================

What: Marks the `foodcircle` directory as a Python package.
Who:  Used by uvicorn (`uvicorn foodcircle.main:app`), pytest and the
      `foodcircle` console script.

Architecture Note:
    The backend is a thin layered service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, cookies, auth gate
    ├─────────────────────────────────────┤
    │        Services (Accessors)         │  ← one MongoDB call per operation
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic request/response models
    ├─────────────────────────────────────┤
    │       Database (Motor client)       │  ← created in lifespan, injected
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
