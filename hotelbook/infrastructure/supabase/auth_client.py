from __future__ import annotations

import logging

import httpx

from hotelbook.application.exceptions import DataAccessError, Unauthenticated
from hotelbook.application.ports.auth import AuthPort
from hotelbook.core.config import settings
from hotelbook.domain.entities.user import Session, User


class SupabaseAuth(AuthPort):
    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = (base_url or settings.SUPABASE_URL or "").rstrip("/")
        self._api_key = api_key or settings.SUPABASE_ANON_KEY
        self._client = client or httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url or not self._api_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required for Supabase auth")

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {access_token or self._api_key}",
        }

    async def sign_in(self, email: str, password: str) -> Session:
        url = f"{self._base_url}/auth/v1/token"
        try:
            response = await self._client.post(
                url,
                params={"grant_type": "password"},
                json={"email": email, "password": password},
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            self._logger.error("Supabase sign-in request failed", extra={"error": str(e)})
            raise DataAccessError("Sign-in request failed") from e

        if response.status_code in (400, 401):
            data = _json_or_empty(response)
            raise Unauthenticated(data.get("error_description") or data.get("msg") or "Invalid login credentials")
        if response.status_code >= 400:
            raise DataAccessError(f"Sign-in failed with status {response.status_code}")

        data = response.json()
        user = data.get("user") or {}
        self._logger.info("User signed in", extra={"user_id": user.get("id")})
        return Session(
            user=User(id=str(user.get("id")), email=user.get("email")),
            access_token=data.get("access_token"),
        )

    async def sign_out(self, session: Session) -> None:
        if not session.access_token:
            return
        try:
            response = await self._client.post(
                f"{self._base_url}/auth/v1/logout",
                headers=self._headers(session.access_token),
            )
        except httpx.HTTPError as e:
            self._logger.error("Supabase sign-out request failed", extra={"error": str(e)})
            raise DataAccessError("Sign-out request failed") from e
        if response.status_code >= 400 and response.status_code != 401:
            raise DataAccessError(f"Sign-out failed with status {response.status_code}")
        self._logger.info("User signed out", extra={"user_id": session.user_id})

    async def get_user(self, access_token: str) -> User | None:
        try:
            response = await self._client.get(
                f"{self._base_url}/auth/v1/user",
                headers=self._headers(access_token),
            )
        except httpx.HTTPError as e:
            self._logger.error("Supabase user lookup failed", extra={"error": str(e)})
            raise DataAccessError("User lookup failed") from e

        if response.status_code in (401, 403):
            return None
        if response.status_code >= 400:
            raise DataAccessError(f"User lookup failed with status {response.status_code}")
        data = response.json()
        return User(id=str(data["id"]), email=data.get("email"))


def _json_or_empty(response: httpx.Response) -> dict:
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
