"""
Food Places API: Application Package
====================================

What: REST API exposing CRUD operations over the `food_places` resource.
Who:  Imported by uvicorn (`foodplaces.main:app`), pytest, and the CLI entry point.

Architecture Note:
    The backend keeps the usual layered split:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Validation + Service (Core)       │  ← input rules, outcome → exception
    ├─────────────────────────────────────┤
    │        Stores (Persistence)         │  ← SQL, Supabase, in-memory
    └─────────────────────────────────────┘

    Routes never talk to a store directly. Stores never raise HTTP errors;
    they return Found / NotFound / Failure values that the service turns
    into application exceptions.
"""

__version__ = "1.0.0"
