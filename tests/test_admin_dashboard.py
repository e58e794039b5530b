"""
Tests for the per-admin dashboard aggregate.
"""

from __future__ import annotations

import asyncio

import pytest

from hotelbook.application.exceptions import DataAccessError, TransientFetchError, Unauthenticated
from hotelbook.application.use_cases.admin_dashboard import AdminDashboardUseCase
from hotelbook.domain.entities.user import Session, User
from hotelbook.infrastructure.store.memory_store import MemoryDataStore

ADMIN = Session(user=User(id="admin-1"), access_token="t")


def _booking(booking_id: str, room_id: str, status: str) -> dict:
    return {
        "id": booking_id,
        "user_id": "guest",
        "room_id": room_id,
        "check_in_date": "2024-01-01",
        "check_out_date": "2024-01-03",
        "total_price": "1000",
        "guest_count": 2,
        "status": status,
        "payment_status": "pending",
    }


TABLES = {
    "hotels": [
        {"id": "h1", "name": "Alpha", "location": "Jaipur", "admin_id": "admin-1", "rating": 4},
        {"id": "h2", "name": "Beta", "location": "Goa", "admin_id": "admin-1", "rating": 5},
        {"id": "h3", "name": "Gamma", "location": "Delhi", "admin_id": "someone-else", "rating": 5},
    ],
    "rooms": [
        {"id": "r1", "hotel_id": "h1", "name": "A1", "room_number": "1", "price_per_night": "500", "capacity": 2},
        {"id": "r2", "hotel_id": "h2", "name": "B1", "room_number": "2", "price_per_night": "500", "capacity": 2},
        {"id": "r3", "hotel_id": "h2", "name": "B2", "room_number": "3", "price_per_night": "500", "capacity": 2},
        {"id": "r4", "hotel_id": "h3", "name": "G1", "room_number": "4", "price_per_night": "500", "capacity": 2},
    ],
    "bookings": [
        _booking("b1", "r1", "active"),
        _booking("b2", "r3", "active"),
        _booking("b3", "r3", "cancelled"),
        _booking("b4", "r4", "active"),
    ],
}


def test_dashboard_covers_every_hotel_and_room_of_the_admin():
    """Not just the first hotel / first room."""
    dashboard = asyncio.run(AdminDashboardUseCase(MemoryDataStore(TABLES)).execute(ADMIN))

    assert {h.id for h in dashboard.hotels} == {"h1", "h2"}
    assert {r.id for r in dashboard.rooms} == {"r1", "r2", "r3"}
    assert {b.id for b in dashboard.bookings} == {"b1", "b2", "b3"}
    assert dashboard.stats.total_hotels == 2
    assert dashboard.stats.total_rooms == 3
    assert dashboard.stats.active_bookings == 2


def test_admin_without_hotels_gets_empty_dashboard():
    other = Session(user=User(id="nobody"), access_token="t")
    dashboard = asyncio.run(AdminDashboardUseCase(MemoryDataStore(TABLES)).execute(other))
    assert dashboard.hotels == []
    assert dashboard.stats.active_bookings == 0


def test_dashboard_requires_sign_in():
    with pytest.raises(Unauthenticated):
        asyncio.run(AdminDashboardUseCase(MemoryDataStore(TABLES)).execute(Session()))


def test_backend_failure_is_transient():
    class BrokenStore(MemoryDataStore):
        async def fetch_many(self, table, filters=None, order=None):
            raise DataAccessError("timeout")

    with pytest.raises(TransientFetchError):
        asyncio.run(AdminDashboardUseCase(BrokenStore(TABLES)).execute(ADMIN))
