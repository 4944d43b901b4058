"""
Food Places API: Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the three ways a request can fail.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": ...}` JSON bodies with the matching status code.
Who:   Raised by the validation dependency and the service layer.

Exception Hierarchy:
    FoodPlacesError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── StoreError        → 500 Internal Server Error (store failed)
"""

from typing import Any, Dict, Optional


class FoodPlacesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FoodPlacesError):
    """
    Raised when a create/update body fails the food place rules.

    When:    Missing or blank name, rating outside [0, 5], unparseable body.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Rating must be between 0 and 5", "request_id": "1a2b3c4d"}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(FoodPlacesError):
    """
    Raised when a requested identifier has no stored record.

    When:    GET/PUT (and DELETE with strict_delete) on an unknown id.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Food place",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=f"{resource} not found", context=ctx)


class StoreError(FoodPlacesError):
    """
    Raised when the backing store reports a failure other than "not found".

    When:    Connection refused, constraint violation, bad credentials, etc.
    HTTP:    500 Internal Server Error, with the store's message text.

    Never retried. The store's error code (if it has one) is kept in
    `context["code"]` for the server log.
    """

    def __init__(
        self,
        message: str = "The data store operation failed",
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if code:
            ctx["code"] = code
        super().__init__(message=message, context=ctx)
        self.code = code
