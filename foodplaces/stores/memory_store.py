"""
Food Places API: In-Memory Store
================================

Process-local dict store. Selected with STORE_BACKEND=memory for local runs
and used by the HTTP tests. Data is lost on restart.

Rows that would break the record schema (null name) are refused with a
Failure, the way a NOT NULL column would refuse them.
"""

import itertools
from datetime import datetime, timezone
from typing import Dict

from pydantic import ValidationError as PydanticValidationError

from foodplaces.schemas.food_place import FoodPlacePayload, FoodPlaceRecord
from foodplaces.stores.base import Failure, FoodPlaceStore, Found, NotFound, StoreResult


class InMemoryFoodPlaceStore(FoodPlaceStore):
    name = "memory"

    def __init__(self):
        self._rows: Dict[int, FoodPlaceRecord] = {}
        self._ids = itertools.count(1)

    async def list_all(self):
        rows = sorted(
            self._rows.values(),
            key=lambda r: (r.created_at, r.id),
            reverse=True,
        )
        return Found(rows)

    async def get(self, place_id: int) -> StoreResult:
        record = self._rows.get(place_id)
        return Found(record) if record is not None else NotFound()

    async def insert(self, payload: FoodPlacePayload) -> StoreResult:
        try:
            record = FoodPlaceRecord(
                id=next(self._ids),
                created_at=datetime.now(timezone.utc),
                **payload.store_fields(),
            )
        except PydanticValidationError as e:
            return Failure(message=f"Row rejected: {e.errors()[0]['msg']}")
        self._rows[record.id] = record
        return Found(record)

    async def update(self, place_id: int, payload: FoodPlacePayload) -> StoreResult:
        current = self._rows.get(place_id)
        if current is None:
            return NotFound()
        try:
            record = FoodPlaceRecord(
                id=current.id,
                created_at=current.created_at,
                **payload.store_fields(),
            )
        except PydanticValidationError as e:
            return Failure(message=f"Row rejected: {e.errors()[0]['msg']}")
        self._rows[place_id] = record
        return Found(record)

    async def delete(self, place_id: int) -> StoreResult:
        record = self._rows.pop(place_id, None)
        return Found(record) if record is not None else NotFound()
