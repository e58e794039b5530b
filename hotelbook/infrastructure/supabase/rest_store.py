from __future__ import annotations

import logging
from typing import Any

import httpx

from hotelbook.application.exceptions import DataAccessError
from hotelbook.application.ports.data_store import DataStorePort, Filter, Record
from hotelbook.core.config import settings


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(filters: Filter | None, order: tuple[str, bool] | None = None) -> dict[str, str]:
    """Translate equality / membership filters into PostgREST query params."""
    params: dict[str, str] = {"select": "*"}
    for column, value in (filters or {}).items():
        if value is None:
            params[column] = "is.null"
        elif isinstance(value, (list, tuple, set, frozenset)):
            joined = ",".join(f'"{_encode_value(v)}"' for v in value)
            params[column] = f"in.({joined})"
        else:
            params[column] = f"eq.{_encode_value(value)}"
    if order:
        column, ascending = order
        params["order"] = f"{column}.{'asc' if ascending else 'desc'}"
    return params


class SupabaseDataStore(DataStorePort):
    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        access_token: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.SUPABASE_URL or "").rstrip("/")
        self._api_key = api_key or settings.SUPABASE_ANON_KEY
        self._access_token = access_token
        self._client = client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url or not self._api_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required for the Supabase data store")

    def with_session(self, access_token: str | None) -> "SupabaseDataStore":
        if access_token == self._access_token:
            return self
        return SupabaseDataStore(
            base_url=self._base_url,
            api_key=self._api_key,
            access_token=access_token,
            client=self._client,
        )

    def _headers(self) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._access_token or self._api_key}",
        }

    def _url(self, table: str) -> str:
        return f"{self._base_url}/rest/v1/{table}"

    async def fetch_one(self, table: str, filters: Filter) -> Record | None:
        rows = await self._get(table, {**build_query(filters), "limit": "1"})
        return rows[0] if rows else None

    async def fetch_many(
        self,
        table: str,
        filters: Filter | None = None,
        order: tuple[str, bool] | None = None,
    ) -> list[Record]:
        return await self._get(table, build_query(filters, order))

    async def insert(self, table: str, record: Record) -> Record:
        headers = {**self._headers(), "Prefer": "return=representation"}
        try:
            response = await self._client.post(self._url(table), json=record, headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Supabase insert failed", extra={"table": table, "error": str(e)})
            raise DataAccessError(f"Insert into {table} failed: {e}") from e

        self._raise_for_status(response, table)
        data = response.json()
        if isinstance(data, list):
            if not data:
                raise DataAccessError(f"Insert into {table} returned no row")
            return data[0]
        return data

    async def _get(self, table: str, params: dict[str, str]) -> list[Record]:
        try:
            response = await self._client.get(self._url(table), params=params, headers=self._headers())
        except httpx.HTTPError as e:
            self._logger.error("Supabase query failed", extra={"table": table, "error": str(e)})
            raise DataAccessError(f"Query on {table} failed: {e}") from e

        self._raise_for_status(response, table)
        data = response.json()
        return list(data or [])

    def _raise_for_status(self, response: httpx.Response, table: str) -> None:
        if response.status_code < 400:
            return
        try:
            error_json = response.json()
            error_message = error_json.get("message") or error_json.get("error")
            error_code = error_json.get("code")
        except Exception:
            error_message = response.text
            error_code = None

        self._logger.error(
            "Supabase request failed",
            extra={
                "table": table,
                "status": response.status_code,
                "error_code": error_code,
                "error": error_message,
            },
        )
        raise DataAccessError(f"{table}: {response.status_code} {error_message}")
