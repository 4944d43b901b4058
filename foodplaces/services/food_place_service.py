"""
Food Places API: Food Place Service
===================================

What:  Turns store results into API outcomes for the five CRUD operations.
How:   Each method issues exactly one store call and maps its result:
           Found(value)  → value
           NotFound()    → NotFoundError (404)
           Failure(...)  → StoreError (500, store message kept)
Who:   Called by the food places route handlers via FastAPI's Depends().

Design Decision:
    The service receives its store in the constructor instead of importing
    a module-level client. Tests hand it a fake; the app hands it whatever
    `build_store()` produced at startup.
"""

import logging
import re
from typing import List, Optional, Union

from foodplaces.exceptions import NotFoundError, StoreError
from foodplaces.schemas.food_place import FoodPlacePayload, FoodPlaceRecord
from foodplaces.stores.base import Failure, FoodPlaceStore, Found, NotFound, StoreResult

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?\d+")

# Postgres BIGINT range; anything wider cannot be a stored id
_MAX_ID = 2**63 - 1


def parse_place_id(raw: Union[int, str]) -> Optional[int]:
    """Integer id named by `raw`, or None when no stored row could have it."""
    if isinstance(raw, int):
        return raw
    if not _ID_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if abs(value) > _MAX_ID:
        return None
    return value


class FoodPlaceService:
    """
    Business logic for food places.

    Responsibilities:
        - list_food_places(): newest first
        - get_food_place(): single record or NotFoundError
        - create_food_place(): insert, returns the stored record
        - update_food_place(): full replace or NotFoundError
        - delete_food_place(): idempotent unless strict_delete is set

    Validation is NOT done here; the route dependency has already rejected
    bad payloads before any method is reached.
    """

    def __init__(self, store: FoodPlaceStore, strict_delete: bool = False):
        self.store = store
        self.strict_delete = strict_delete

    async def list_food_places(self) -> List[FoodPlaceRecord]:
        result = await self.store.list_all()
        return self._unwrap(result, operation="list")

    async def get_food_place(self, place_id: Union[int, str]) -> FoodPlaceRecord:
        key = parse_place_id(place_id)
        if key is None:
            raise NotFoundError(resource="Food place", resource_id=place_id)
        result = await self.store.get(key)
        return self._unwrap(result, operation="get", place_id=key)

    async def create_food_place(self, payload: FoodPlacePayload) -> FoodPlaceRecord:
        result = await self.store.insert(payload)
        record = self._unwrap(result, operation="create")
        logger.info("Food place %s created: %s", record.id, record.name)
        return record

    async def update_food_place(
        self, place_id: Union[int, str], payload: FoodPlacePayload
    ) -> FoodPlaceRecord:
        key = parse_place_id(place_id)
        if key is None:
            raise NotFoundError(resource="Food place", resource_id=place_id)
        result = await self.store.update(key, payload)
        record = self._unwrap(result, operation="update", place_id=key)
        logger.info("Food place %s updated", key)
        return record

    async def delete_food_place(self, place_id: Union[int, str]) -> None:
        """
        Remove a food place.

        Deleting an id that does not exist succeeds silently unless the
        service was built with strict_delete=True, in which case it raises
        NotFoundError like get/update do. An id that is not an integer
        cannot exist, so it takes the same path without a store call.
        """
        key = parse_place_id(place_id)
        result = NotFound() if key is None else await self.store.delete(key)
        if isinstance(result, NotFound) and not self.strict_delete:
            logger.info("Delete of unknown food place %s treated as success", place_id)
            return
        self._unwrap(result, operation="delete", place_id=place_id)
        logger.info("Food place %s deleted", key)

    @staticmethod
    def _unwrap(result: StoreResult, operation: str, place_id=None):
        if isinstance(result, Found):
            return result.value
        if isinstance(result, NotFound):
            raise NotFoundError(resource="Food place", resource_id=place_id)
        if isinstance(result, Failure):
            raise StoreError(
                message=result.message,
                code=result.code,
                context={"operation": operation, "place_id": place_id},
            )
        raise TypeError(f"Unexpected store result: {result!r}")
