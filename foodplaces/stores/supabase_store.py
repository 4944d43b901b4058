"""
Food Places API: Supabase Store
===============================

What:  FoodPlaceStore backed by a Supabase project, reached through its
       PostgREST HTTP API with httpx.
How:   One HTTP request per operation against `/rest/v1/<table>`:

    list_all   GET    ?select=*&order=created_at.desc,id.desc
    get        GET    ?select=*&id=eq.<id>          (single-object Accept)
    insert     POST   body=<fields>                 (single-object Accept)
    update     PATCH  ?id=eq.<id> body=<fields>     (single-object Accept)
    delete     DELETE ?id=eq.<id>                   (returns deleted rows)

    Writes send `Prefer: return=representation` so the stored row comes back.

Error mapping:
    PostgREST answers a single-object request that matched no row with
    HTTP 406 and error code PGRST116. That code becomes NotFound(); every
    other error body, transport error or malformed row becomes Failure().
"""

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from foodplaces.schemas.food_place import FoodPlacePayload, FoodPlaceRecord
from foodplaces.stores.base import Failure, FoodPlaceStore, Found, NotFound, StoreResult

logger = logging.getLogger(__name__)

# PostgREST: "JSON object requested, multiple (or no) rows returned"
ROW_NOT_FOUND_CODE = "PGRST116"

SINGLE_OBJECT = "application/vnd.pgrst.object+json"
RETURN_REPRESENTATION = "return=representation"


class SupabaseFoodPlaceStore(FoodPlaceStore):
    """
    PostgREST client for the food places table.

    Args:
        url:       Supabase project URL (https://<ref>.supabase.co)
        api_key:   anon or service-role key, sent as `apikey` and bearer token
        table:     PostgREST resource name
        transport: Optional httpx transport (tests pass httpx.MockTransport)
    """

    name = "supabase"

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = "food_places",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._path = f"/{table}"
        self._client = httpx.AsyncClient(
            base_url=f"{url.rstrip('/')}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ── Operations ────────────────────────────────────────────────────────

    async def list_all(self) -> StoreResult:
        result = await self._request(
            "GET", params={"select": "*", "order": "created_at.desc,id.desc"}
        )
        if not isinstance(result, Found):
            return result
        rows = result.value or []
        try:
            return Found([FoodPlaceRecord.model_validate(row) for row in rows])
        except PydanticValidationError as e:
            return self._malformed(e)

    async def get(self, place_id: int) -> StoreResult:
        result = await self._request(
            "GET",
            params={"select": "*", "id": f"eq.{place_id}"},
            single=True,
        )
        return self._to_record(result)

    async def insert(self, payload: FoodPlacePayload) -> StoreResult:
        result = await self._request(
            "POST",
            json=payload.store_fields(),
            single=True,
            prefer=RETURN_REPRESENTATION,
        )
        return self._to_record(result)

    async def update(self, place_id: int, payload: FoodPlacePayload) -> StoreResult:
        result = await self._request(
            "PATCH",
            params={"id": f"eq.{place_id}"},
            json=payload.store_fields(),
            single=True,
            prefer=RETURN_REPRESENTATION,
        )
        return self._to_record(result)

    async def delete(self, place_id: int) -> StoreResult:
        result = await self._request(
            "DELETE",
            params={"id": f"eq.{place_id}"},
            prefer=RETURN_REPRESENTATION,
        )
        if not isinstance(result, Found):
            return result
        rows = result.value or []
        if not rows:
            return NotFound()
        return self._to_record(Found(rows[0]))

    # ── Plumbing ──────────────────────────────────────────────────────────

    async def _request(
        self,
        method: str,
        params: Optional[Dict[str, str]] = None,
        json: Optional[Dict[str, Any]] = None,
        single: bool = False,
        prefer: Optional[str] = None,
    ) -> StoreResult:
        headers = {}
        if single:
            headers["Accept"] = SINGLE_OBJECT
        if prefer:
            headers["Prefer"] = prefer

        try:
            response = await self._client.request(
                method, self._path, params=params, json=json, headers=headers
            )
        except httpx.HTTPError as e:
            logger.error("Supabase %s %s failed: %s", method, self._path, e)
            return Failure(message=str(e) or type(e).__name__)

        if response.is_success:
            if not response.content:
                return Found(None)
            try:
                return Found(response.json())
            except ValueError:
                return Failure(message="Store returned a non-JSON response")

        return self._error(response)

    def _error(self, response: httpx.Response) -> StoreResult:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        code = body.get("code")
        if code == ROW_NOT_FOUND_CODE:
            return NotFound()

        message = body.get("message") or response.reason_phrase or f"HTTP {response.status_code}"
        logger.error(
            "Supabase error %s (code=%s): %s", response.status_code, code, message
        )
        return Failure(message=message, code=str(code) if code is not None else None)

    def _to_record(self, result: StoreResult) -> StoreResult:
        if not isinstance(result, Found):
            return result
        if not result.value:
            return NotFound()
        try:
            return Found(FoodPlaceRecord.model_validate(result.value))
        except PydanticValidationError as e:
            return self._malformed(e)

    @staticmethod
    def _malformed(exc: PydanticValidationError) -> Failure:
        logger.error("Supabase returned a row that does not match FoodPlaceRecord: %s", exc)
        return Failure(message="Store returned a malformed food place record")
