"""
Food Places API: Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    Request ID runs first so the access log line carries the ID.

Route-level:
    validation.py is not Starlette middleware; it is a FastAPI dependency
    attached to the create and update routes only.
"""
