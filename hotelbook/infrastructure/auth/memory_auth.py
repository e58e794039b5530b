from __future__ import annotations

import logging
import secrets

from hotelbook.application.exceptions import Unauthenticated
from hotelbook.application.ports.auth import AuthPort
from hotelbook.domain.entities.user import Session, User


class MemoryAuth(AuthPort):
    """Email/password accounts held in process. Tokens live until sign-out."""

    def __init__(self, accounts: dict[str, tuple[str, str]] | None = None) -> None:
        # email -> (user_id, password)
        self._accounts = dict(accounts or {})
        self._tokens: dict[str, User] = {}
        self._logger = logging.getLogger(__name__)

    async def sign_in(self, email: str, password: str) -> Session:
        account = self._accounts.get((email or "").strip().lower())
        if account is None or account[1] != password:
            raise Unauthenticated("Invalid login credentials")

        user = User(id=account[0], email=email.strip().lower())
        token = secrets.token_urlsafe(24)
        self._tokens[token] = user
        self._logger.info("User signed in", extra={"user_id": user.id})
        return Session(user=user, access_token=token)

    async def sign_out(self, session: Session) -> None:
        if session.access_token:
            self._tokens.pop(session.access_token, None)
        self._logger.info("User signed out", extra={"user_id": session.user_id})

    async def get_user(self, access_token: str) -> User | None:
        return self._tokens.get(access_token)
