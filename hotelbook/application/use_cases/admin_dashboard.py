from __future__ import annotations

import logging
from dataclasses import dataclass, field

from hotelbook.application.exceptions import DataAccessError, TransientFetchError, Unauthenticated
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.utils.records import booking_from_record, hotel_from_record, room_from_record
from hotelbook.domain.entities.booking import Booking
from hotelbook.domain.entities.hotel import Hotel
from hotelbook.domain.entities.room import Room
from hotelbook.domain.entities.user import Session


@dataclass(frozen=True)
class DashboardStats:
    total_hotels: int
    total_rooms: int
    active_bookings: int


@dataclass(frozen=True)
class AdminDashboard:
    hotels: list[Hotel] = field(default_factory=list)
    rooms: list[Room] = field(default_factory=list)
    bookings: list[Booking] = field(default_factory=list)

    @property
    def stats(self) -> DashboardStats:
        return DashboardStats(
            total_hotels=len(self.hotels),
            total_rooms=len(self.rooms),
            active_bookings=sum(1 for b in self.bookings if b.status == "active"),
        )


class AdminDashboardUseCase:
    def __init__(self, store: DataStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    async def execute(self, session: Session) -> AdminDashboard:
        """Everything owned by the signed-in admin: their hotels, all rooms in them, all bookings of those rooms."""
        if not session.user_id:
            raise Unauthenticated("Please sign in to access the admin dashboard")

        try:
            hotel_rows = await self._store.fetch_many("hotels", {"admin_id": session.user_id}, order=("name", True))
            hotels = [hotel_from_record(row) for row in hotel_rows]
            if not hotels:
                return AdminDashboard()

            room_rows = await self._store.fetch_many(
                "rooms", {"hotel_id": tuple(h.id for h in hotels)}, order=("room_number", True)
            )
            rooms = [room_from_record(row) for row in room_rows]
            if not rooms:
                return AdminDashboard(hotels=hotels)

            booking_rows = await self._store.fetch_many(
                "bookings", {"room_id": tuple(r.id for r in rooms)}, order=("created_at", False)
            )
        except DataAccessError as e:
            self._logger.error("Error fetching admin data", extra={"user_id": session.user_id, "error": str(e)})
            raise TransientFetchError("Failed to load dashboard") from e

        return AdminDashboard(
            hotels=hotels,
            rooms=rooms,
            bookings=[booking_from_record(row) for row in booking_rows],
        )
