"""
Food Places API: Abstract Store Interface
=========================================

What:  The contract every food place backend implements, plus the result
       values it returns.
How:   Concrete stores inherit from FoodPlaceStore and implement the five
       operations. None of them raise for expected outcomes: each returns
       Found(value), NotFound() or Failure(message, code).
Who:   Called by FoodPlaceService; built by `build_store()`.

Result values:
    Found(value)            operation succeeded; value is a record, a list
                            of records, or the deleted record
    NotFound()              no row matched the identifier
    Failure(message, code)  anything else went wrong in the store

    Each backend maps its own "no row" convention (PostgREST PGRST116, an
    empty SELECT, a dict miss) onto NotFound, so callers branch on the type
    and never on store error codes.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar, Union

from foodplaces.schemas.food_place import FoodPlacePayload, FoodPlaceRecord

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Failure:
    message: str
    code: Optional[str] = None


StoreResult = Union[Found[Any], NotFound, Failure]


class FoodPlaceStore(ABC):
    """
    Abstract persistence for food places.

    Contract:
        - list_all() orders by created_at descending, newest first
        - insert() assigns id and created_at
        - update() replaces all five mutable fields
        - delete() reports NotFound when nothing was removed; whether that is
          an error is decided by the caller
        - a single operation never spans more than one store transaction

    Implementations:
        - SqlFoodPlaceStore: async SQLAlchemy
        - SupabaseFoodPlaceStore: PostgREST over httpx
        - InMemoryFoodPlaceStore: dict, for local runs and tests
    """

    #: Short name used in logs
    name: str = "store"

    @abstractmethod
    async def list_all(self) -> Union[Found[List[FoodPlaceRecord]], Failure]:
        """All records, newest first."""
        ...

    @abstractmethod
    async def get(self, place_id: int) -> StoreResult:
        """Found(record) for a matching id, NotFound() otherwise."""
        ...

    @abstractmethod
    async def insert(self, payload: FoodPlacePayload) -> StoreResult:
        """Found(created record)."""
        ...

    @abstractmethod
    async def update(self, place_id: int, payload: FoodPlacePayload) -> StoreResult:
        """Found(updated record) or NotFound()."""
        ...

    @abstractmethod
    async def delete(self, place_id: int) -> StoreResult:
        """Found(deleted record) or NotFound()."""
        ...

    async def initialize(self) -> None:
        """Startup hook, called from the app lifespan."""

    async def close(self) -> None:
        """Shutdown hook; releases pools and HTTP clients."""
