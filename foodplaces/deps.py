"""
Food Places API: Request Dependencies
=====================================

What:  FastAPI dependency getters for the store and the service.
How:   The store lives on `app.state.store` (set by `create_app(store=...)` or
       by the lifespan). Nothing here is a module-level singleton.
"""

from fastapi import Depends, Request

from foodplaces.config import settings
from foodplaces.stores.base import FoodPlaceStore
from foodplaces.services.food_place_service import FoodPlaceService


def get_store(request: Request) -> FoodPlaceStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("No food place store configured on the application")
    return store


def get_food_place_service(
    request: Request,
    store: FoodPlaceStore = Depends(get_store),
) -> FoodPlaceService:
    strict_delete = getattr(request.app.state, "strict_delete", settings.strict_delete)
    return FoodPlaceService(store, strict_delete=strict_delete)
