from __future__ import annotations

from abc import ABC, abstractmethod

from hotelbook.domain.entities.user import Session, User


class AuthPort(ABC):
    @abstractmethod
    async def sign_in(self, email: str, password: str) -> Session:
        """Authenticate with email/password. Raises Unauthenticated on bad credentials."""
        raise NotImplementedError

    @abstractmethod
    async def sign_out(self, session: Session) -> None:
        raise NotImplementedError

    @abstractmethod
    async def get_user(self, access_token: str) -> User | None:
        """Resolve an access token to its user, or None if the token is not valid."""
        raise NotImplementedError
