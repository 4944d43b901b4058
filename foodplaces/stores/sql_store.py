"""
Food Places API: SQL Store
==========================

What:  FoodPlaceStore backed by async SQLAlchemy (asyncpg in production,
       aiosqlite in tests).
How:   Every operation opens its own session_scope(): one transaction,
       committed on success, rolled back on error. SQLAlchemy errors become
       Failure values carrying the driver's message.

Query plans:
    list_all: SELECT ... ORDER BY created_at DESC, id DESC
              → idx_food_places_created_at
    get/update/delete: primary key lookup
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from foodplaces.database import create_tables, dispose_engine, session_scope
from foodplaces.models.food_place import FoodPlace
from foodplaces.schemas.food_place import FoodPlacePayload, FoodPlaceRecord
from foodplaces.stores.base import Failure, FoodPlaceStore, Found, NotFound, StoreResult

logger = logging.getLogger(__name__)


def _failure(exc: SQLAlchemyError) -> Failure:
    # DBAPIError.orig holds the driver exception; its text omits the SQL statement
    orig = getattr(exc, "orig", None)
    message = str(orig) if orig is not None else str(exc)
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    return Failure(message=message or type(exc).__name__, code=code)


class SqlFoodPlaceStore(FoodPlaceStore):
    """
    Relational store over the `food_places` table.

    Args:
        session_factory: Factory from `build_session_factory()`.
        engine:          Disposed on close() and used by initialize().
        create_schema:   When True, initialize() creates missing tables.
    """

    name = "sql"

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: Optional[AsyncEngine] = None,
        create_schema: bool = False,
    ):
        self._session_factory = session_factory
        self._engine = engine
        self._create_schema = create_schema

    async def initialize(self) -> None:
        if self._create_schema and self._engine is not None:
            await create_tables(self._engine)
            logger.info("Ensured food_places table exists")

    async def close(self) -> None:
        if self._engine is not None:
            await dispose_engine(self._engine)

    async def list_all(self):
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(
                    select(FoodPlace).order_by(FoodPlace.created_at.desc(), FoodPlace.id.desc())
                )
                rows = result.scalars().all()
                return Found([FoodPlaceRecord.model_validate(row) for row in rows])
        except SQLAlchemyError as e:
            logger.error("SQL error listing food places: %s", e)
            return _failure(e)

    async def get(self, place_id: int) -> StoreResult:
        try:
            async with session_scope(self._session_factory) as session:
                place = await session.get(FoodPlace, place_id)
                if place is None:
                    return NotFound()
                return Found(FoodPlaceRecord.model_validate(place))
        except SQLAlchemyError as e:
            logger.error("SQL error fetching food place %s: %s", place_id, e)
            return _failure(e)

    async def insert(self, payload: FoodPlacePayload) -> StoreResult:
        try:
            async with session_scope(self._session_factory) as session:
                place = FoodPlace(**payload.store_fields())
                session.add(place)
                await session.flush()  # assigns id
                record = FoodPlaceRecord.model_validate(place)
            return Found(record)
        except SQLAlchemyError as e:
            logger.error("SQL error inserting food place: %s", e)
            return _failure(e)

    async def update(self, place_id: int, payload: FoodPlacePayload) -> StoreResult:
        try:
            async with session_scope(self._session_factory) as session:
                place = await session.get(FoodPlace, place_id)
                if place is None:
                    return NotFound()
                for key, value in payload.store_fields().items():
                    setattr(place, key, value)
                await session.flush()
                record = FoodPlaceRecord.model_validate(place)
            return Found(record)
        except SQLAlchemyError as e:
            logger.error("SQL error updating food place %s: %s", place_id, e)
            return _failure(e)

    async def delete(self, place_id: int) -> StoreResult:
        try:
            async with session_scope(self._session_factory) as session:
                place = await session.get(FoodPlace, place_id)
                if place is None:
                    return NotFound()
                record = FoodPlaceRecord.model_validate(place)
                await session.delete(place)
            return Found(record)
        except SQLAlchemyError as e:
            logger.error("SQL error deleting food place %s: %s", place_id, e)
            return _failure(e)
