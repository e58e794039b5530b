from __future__ import annotations

import copy
import uuid
from datetime import datetime, timezone
from typing import Any

from hotelbook.application.exceptions import DataAccessError
from hotelbook.application.ports.data_store import DataStorePort, Filter, Record

KNOWN_TABLES = ("hotels", "rooms", "room_types", "bookings", "contact_messages")


class MemoryDataStore(DataStorePort):
    def __init__(self, tables: dict[str, list[Record]] | None = None) -> None:
        self._tables: dict[str, list[Record]] = {name: [] for name in KNOWN_TABLES}
        for name, rows in (tables or {}).items():
            self._tables[name] = [dict(row) for row in rows]

    async def fetch_one(self, table: str, filters: Filter) -> Record | None:
        rows = self._select(table, filters)
        return copy.deepcopy(rows[0]) if rows else None

    async def fetch_many(
        self,
        table: str,
        filters: Filter | None = None,
        order: tuple[str, bool] | None = None,
    ) -> list[Record]:
        rows = self._select(table, filters)
        if order:
            column, ascending = order
            # Rows missing the column sort last either way.
            present = [r for r in rows if r.get(column) is not None]
            missing = [r for r in rows if r.get(column) is None]
            present.sort(key=lambda r: r[column], reverse=not ascending)
            rows = present + missing
        return copy.deepcopy(rows)

    async def insert(self, table: str, record: Record) -> Record:
        rows = self._table(table)
        stored = dict(record)
        stored.setdefault("id", str(uuid.uuid4()))
        stored.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        rows.append(stored)
        return copy.deepcopy(stored)

    def rows(self, table: str) -> list[Record]:
        return copy.deepcopy(self._table(table))

    def _table(self, table: str) -> list[Record]:
        if table not in self._tables:
            raise DataAccessError(f'relation "{table}" does not exist')
        return self._tables[table]

    def _select(self, table: str, filters: Filter | None) -> list[Record]:
        return [row for row in self._table(table) if _matches(row, filters or {})]


def _matches(row: Record, filters: Filter) -> bool:
    for column, expected in filters.items():
        actual: Any = row.get(column)
        if isinstance(expected, (list, tuple, set, frozenset)):
            if actual not in expected and str(actual) not in {str(v) for v in expected}:
                return False
        elif expected is None:
            if actual is not None:
                return False
        elif actual != expected and str(actual) != str(expected):
            return False
    return True
