"""
Tests for hotel listing, featured search, hotel details, quick reservation and contact messages.
"""

from __future__ import annotations

import asyncio
from datetime import date
from decimal import Decimal

import pytest

from hotelbook.application.exceptions import (
    DataAccessError,
    InvalidDraftError,
    InvalidStayError,
    NotFound,
    SubmissionError,
    Unauthenticated,
)
from hotelbook.application.use_cases.contact import SendContactMessageUseCase
from hotelbook.application.use_cases.hotels import HotelCatalogUseCase, QuickReservationUseCase
from hotelbook.application.use_cases.reserve_room import ReserveRoomUseCase
from hotelbook.application.utils.records import hotel_from_record
from hotelbook.domain.entities.user import Session, User
from hotelbook.infrastructure.catalog.featured_hotels import FEATURED_HOTELS
from hotelbook.infrastructure.store.demo_data import DEMO_TABLES
from hotelbook.infrastructure.store.memory_store import MemoryDataStore


def _catalog(store: MemoryDataStore | None = None) -> HotelCatalogUseCase:
    return HotelCatalogUseCase(store=store or MemoryDataStore(DEMO_TABLES), featured=FEATURED_HOTELS)


def _quick_reservation(store: MemoryDataStore) -> QuickReservationUseCase:
    return QuickReservationUseCase(
        catalog=_catalog(store),
        reserve_room=ReserveRoomUseCase(store),
        today=lambda: date(2024, 4, 1),
    )


def test_hotels_listed_by_rating_descending():
    hotels = asyncio.run(_catalog().list_hotels())
    ratings = [h.rating for h in hotels]
    assert ratings == sorted(ratings, reverse=True)
    assert len(hotels) == 3


def test_featured_search_matches_name_or_location_case_insensitively():
    catalog = _catalog()
    assert [h.name for h in catalog.search_featured("agra")] == ["The Oberoi Amarvilas"]
    assert {h.name for h in catalog.search_featured("PALACE")} == {"Taj Lake Palace", "The Leela Palace"}
    assert len(catalog.search_featured("")) == 3
    assert catalog.search_featured("mumbai") == []


def test_hotel_details_include_rooms():
    details = asyncio.run(_catalog().get_details("1"))
    assert details.hotel.name == "Taj Lake Palace"
    assert {r.id for r in details.rooms} == {"101", "102"}


def test_unknown_hotel_not_found():
    with pytest.raises(NotFound):
        asyncio.run(_catalog().get_details("missing"))


def test_quick_reservation_prices_the_stay():
    store = MemoryDataStore(DEMO_TABLES)
    uc = _quick_reservation(store)
    session = Session(user=User(id="user-9"), access_token="t")

    booking = asyncio.run(
        uc.execute(session, "1", "101", check_in=date(2024, 5, 1), check_out=date(2024, 5, 3), guests=2)
    )
    assert booking.total_price == Decimal("70000")
    assert len(store.rows("bookings")) == 1


def test_quick_reservation_requires_sign_in():
    store = MemoryDataStore(DEMO_TABLES)
    uc = _quick_reservation(store)
    with pytest.raises(Unauthenticated):
        asyncio.run(uc.execute(Session(), "1", "101", check_in=date(2024, 5, 1), check_out=date(2024, 5, 3), guests=2))
    assert store.rows("bookings") == []


def test_quick_reservation_rejects_check_in_before_today():
    store = MemoryDataStore(DEMO_TABLES)
    uc = _quick_reservation(store)
    session = Session(user=User(id="user-9"), access_token="t")

    with pytest.raises(InvalidStayError):
        asyncio.run(uc.execute(session, "1", "101", check_in=date(2024, 3, 31), check_out=date(2024, 4, 2), guests=2))
    assert store.rows("bookings") == []


def test_fractional_rating_is_kept():
    hotel = hotel_from_record({"id": 7, "name": "Lakeside", "location": "Bhopal", "rating": 4.5})
    assert hotel.rating == 4.5


def test_contact_message_is_stored():
    store = MemoryDataStore()
    asyncio.run(
        SendContactMessageUseCase(store).execute(
            name="Asha", email="asha@example.com", subject="Group booking", message="Ten rooms in March?"
        )
    )
    rows = store.rows("contact_messages")
    assert len(rows) == 1
    assert rows[0]["subject"] == "Group booking"


def test_contact_message_requires_all_fields():
    with pytest.raises(InvalidDraftError):
        asyncio.run(SendContactMessageUseCase(MemoryDataStore()).execute("Asha", "asha@example.com", "", "Hi"))


def test_contact_backend_failure_is_submission_error():
    class BrokenStore(MemoryDataStore):
        async def insert(self, table, record):
            raise DataAccessError("permission denied")

    with pytest.raises(SubmissionError) as excinfo:
        asyncio.run(SendContactMessageUseCase(BrokenStore()).execute("A", "a@example.com", "S", "M"))
    assert excinfo.value.message == "Failed to send message. Please try again later."
