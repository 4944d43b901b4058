"""
Food Places API: Food Place Validation
======================================

What:  The rules a create/update body must satisfy before the store is touched.
How:   `check_food_place()` is the plain rule function; `validate_food_place`
       wraps it as a FastAPI dependency so routes declare it with Depends().
       Read and delete routes do not use it.

Rules:
    1. name present and not blank after strip()
       → "Name is required and cannot be empty"
    2. rating, when present, within [0, 5]
       → "Rating must be between 0 and 5"
"""

from typing import Optional

from fastapi import Body

from foodplaces.exceptions import ValidationError
from foodplaces.schemas.food_place import FoodPlacePayload

NAME_REQUIRED = "Name is required and cannot be empty"
RATING_OUT_OF_RANGE = "Rating must be between 0 and 5"

RATING_MIN = 0
RATING_MAX = 5


def check_food_place(name: Optional[str], rating: Optional[float]) -> None:
    """Raise ValidationError for the first broken rule; return None otherwise."""
    if name is None or name.strip() == "":
        raise ValidationError(message=NAME_REQUIRED, field="name")

    if rating is not None and (rating < RATING_MIN or rating > RATING_MAX):
        raise ValidationError(
            message=RATING_OUT_OF_RANGE,
            field="rating",
            context={"rating": rating},
        )


async def validate_food_place(
    payload: Optional[FoodPlacePayload] = Body(default=None),
) -> FoodPlacePayload:
    """
    FastAPI dependency: parse the JSON body and apply the food place rules.

    A request without a body (or a JSON `null`) is treated as an empty
    object, so it fails on the missing name like any other nameless body.
    Returns the payload so the route receives it as its argument.
    """
    if payload is None:
        payload = FoodPlacePayload()
    check_food_place(payload.name, payload.rating)
    return payload
