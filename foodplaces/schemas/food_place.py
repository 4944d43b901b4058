"""
Food Places API: Pydantic Request/Response Schemas
==================================================

What:  The API contract for the food places resource.
How:   FastAPI parses request bodies into FoodPlacePayload and serializes
       FoodPlaceRecord responses; stores also hand back FoodPlaceRecord.

Why `name` is Optional on the payload:
    A missing or blank name must answer 400 "Name is required and cannot be
    empty", which the validation dependency produces. A required pydantic
    field would produce a generic schema error instead.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Keys forwarded to the store on create/update; anything else in the body is dropped
MUTABLE_FIELDS = ("name", "address", "cuisine_type", "rating", "price_range")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class FoodPlacePayload(BaseModel):
    """
    Body of POST /api/food-places and PUT /api/food-places/{id}.

    Update is a full replace: fields left out of the body are stored as null.
    """
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = Field(default=None, description="Display name (required, non-blank)")
    address: Optional[str] = Field(default=None, description="Street address")
    cuisine_type: Optional[str] = Field(default=None, description="e.g. Italian, Japanese")
    rating: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Average rating, 0 to 5 inclusive",
    )
    price_range: Optional[str] = Field(default=None, description="One of $, $$, $$$, $$$$")

    @field_validator("rating", mode="before")
    @classmethod
    def reject_boolean_rating(cls, v):
        """JSON true/false would otherwise coerce to 1.0/0.0."""
        if isinstance(v, bool):
            raise ValueError("rating must be a number")
        return v

    def store_fields(self) -> dict:
        """The five mutable columns, explicit nulls included."""
        return {key: getattr(self, key) for key in MUTABLE_FIELDS}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class FoodPlaceRecord(BaseModel):
    """A stored food place, as every store returns it and every route renders it."""
    model_config = ConfigDict(from_attributes=True, extra="ignore")

    id: int = Field(description="Store-assigned identifier")
    name: str
    address: Optional[str] = None
    cuisine_type: Optional[str] = None
    rating: Optional[float] = None
    price_range: Optional[str] = None
    created_at: datetime = Field(description="Insert time (UTC ISO 8601)")


class DeleteResponse(BaseModel):
    message: str = Field(default="Deleted successfully")


class ErrorResponse(BaseModel):
    """
    Error body for every non-2xx answer.

    Example:
        {"error": "Food place not found", "request_id": "1a2b3c4d"}
    """
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness answer for GET /health."""
    status: str = Field(default="OK")
    timestamp: datetime = Field(description="Server time (UTC)")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since the process started")
