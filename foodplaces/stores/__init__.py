"""
Food Places API: Store Backends
===============================

What:  Persistence backends behind the FoodPlaceStore interface, and the
       factory that picks one from settings.

Store Inventory:
    - FoodPlaceStore (abstract): contract + Found / NotFound / Failure results
    - SqlFoodPlaceStore: async SQLAlchemy (STORE_BACKEND=sql, default)
    - SupabaseFoodPlaceStore: Supabase PostgREST API (STORE_BACKEND=supabase)
    - InMemoryFoodPlaceStore: process-local dict (STORE_BACKEND=memory)
"""

import logging
from typing import Optional

from foodplaces.config import Settings, settings as default_settings
from foodplaces.stores.base import (
    Failure,
    FoodPlaceStore,
    Found,
    NotFound,
    StoreResult,
)

logger = logging.getLogger(__name__)

__all__ = [
    "Failure",
    "FoodPlaceStore",
    "Found",
    "NotFound",
    "StoreResult",
    "build_store",
]


def build_store(app_settings: Optional[Settings] = None) -> FoodPlaceStore:
    """
    Construct the store named by `app_settings.store_backend`.

    Imports are local so that an unused backend's driver is never loaded.
    """
    cfg = app_settings or default_settings
    backend = cfg.store_backend

    if backend == "memory":
        from foodplaces.stores.memory_store import InMemoryFoodPlaceStore
        store: FoodPlaceStore = InMemoryFoodPlaceStore()

    elif backend == "supabase":
        from foodplaces.stores.supabase_store import SupabaseFoodPlaceStore
        store = SupabaseFoodPlaceStore(
            url=cfg.supabase_url,
            api_key=cfg.supabase_key,
            table=cfg.supabase_table,
        )

    else:
        from foodplaces.database import build_session_factory, create_engine
        from foodplaces.stores.sql_store import SqlFoodPlaceStore
        engine = create_engine(cfg)
        store = SqlFoodPlaceStore(
            build_session_factory(engine),
            engine=engine,
            create_schema=cfg.db_create_tables,
        )

    logger.info("Using %s store backend", store.name)
    return store
