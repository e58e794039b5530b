from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

Record = dict[str, Any]
# Column -> value. A list/tuple value means "column is one of these".
Filter = Mapping[str, Any]


class DataStorePort(ABC):
    @abstractmethod
    async def fetch_one(self, table: str, filters: Filter) -> Record | None:
        """Return the single matching row, or None when nothing matches."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_many(
        self,
        table: str,
        filters: Filter | None = None,
        order: tuple[str, bool] | None = None,
    ) -> list[Record]:
        """Return matching rows. `order` is (column, ascending)."""
        raise NotImplementedError

    @abstractmethod
    async def insert(self, table: str, record: Record) -> Record:
        """Insert one row and return it as stored (with generated columns)."""
        raise NotImplementedError

    def with_session(self, access_token: str | None) -> "DataStorePort":
        """Return a store that issues requests on behalf of `access_token`."""
        return self

