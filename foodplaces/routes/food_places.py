"""
Food Places API: Food Places Route Handlers
===========================================

What:  CRUD endpoints under /api/food-places.
How:   Each handler pulls a FoodPlaceService from Depends(), makes one call,
       and returns the result. Errors travel as exceptions to the global
       handlers in main.py.

Endpoints:
    GET    /api/food-places          list, newest first
    GET    /api/food-places/{id}     one record
    POST   /api/food-places          create (validated)   → 201
    PUT    /api/food-places/{id}     full replace (validated)
    DELETE /api/food-places/{id}     remove

`{id}` arrives as text; the service decides whether it names a stored row,
so an id like `abc` is simply one that matches nothing.
"""

from typing import List

from fastapi import APIRouter, Depends

from foodplaces.deps import get_food_place_service
from foodplaces.middleware.validation import validate_food_place
from foodplaces.schemas.food_place import (
    DeleteResponse,
    ErrorResponse,
    FoodPlacePayload,
    FoodPlaceRecord,
)
from foodplaces.services.food_place_service import FoodPlaceService

router = APIRouter(prefix="/api/food-places", tags=["Food Places"])


@router.get(
    "",
    response_model=List[FoodPlaceRecord],
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="List food places",
    description="Returns every food place, most recently created first.",
)
async def list_food_places(
    service: FoodPlaceService = Depends(get_food_place_service),
) -> List[FoodPlaceRecord]:
    return await service.list_food_places()


@router.get(
    "/{place_id}",
    response_model=FoodPlaceRecord,
    responses={
        404: {"description": "Food place not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a food place by ID",
)
async def get_food_place(
    place_id: str,
    service: FoodPlaceService = Depends(get_food_place_service),
) -> FoodPlaceRecord:
    return await service.get_food_place(place_id)


@router.post(
    "",
    status_code=201,
    response_model=FoodPlaceRecord,
    responses={
        400: {"description": "Invalid food place", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a food place",
    description=(
        "Stores name, address, cuisine_type, rating and price_range. "
        "Other body fields are ignored. The store assigns id and created_at."
    ),
)
async def create_food_place(
    payload: FoodPlacePayload = Depends(validate_food_place),
    service: FoodPlaceService = Depends(get_food_place_service),
) -> FoodPlaceRecord:
    return await service.create_food_place(payload)


@router.put(
    "/{place_id}",
    response_model=FoodPlaceRecord,
    responses={
        400: {"description": "Invalid food place", "model": ErrorResponse},
        404: {"description": "Food place not found", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Replace a food place",
    description="Full replace: fields missing from the body are stored as null.",
)
async def update_food_place(
    place_id: str,
    payload: FoodPlacePayload = Depends(validate_food_place),
    service: FoodPlaceService = Depends(get_food_place_service),
) -> FoodPlaceRecord:
    return await service.update_food_place(place_id, payload)


@router.delete(
    "/{place_id}",
    response_model=DeleteResponse,
    responses={500: {"description": "Store error", "model": ErrorResponse}},
    summary="Delete a food place",
)
async def delete_food_place(
    place_id: str,
    service: FoodPlaceService = Depends(get_food_place_service),
) -> DeleteResponse:
    await service.delete_food_place(place_id)
    return DeleteResponse(message="Deleted successfully")
