from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    email: str | None = None


@dataclass(frozen=True)
class Session:
    """Identity for one request. Built per request and passed explicitly."""

    user: User | None = None
    access_token: str | None = None

    @property
    def user_id(self) -> str | None:
        return self.user.id if self.user else None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
