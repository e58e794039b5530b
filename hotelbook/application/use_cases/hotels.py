from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable

from hotelbook.application.exceptions import DataAccessError, NotFound, TransientFetchError
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.use_cases.reserve_room import ReserveRoomUseCase
from hotelbook.application.utils.catalog_search import filter_hotels
from hotelbook.application.utils.draft_rules import check_not_in_past
from hotelbook.application.utils.records import hotel_from_record, room_from_record
from hotelbook.domain.entities.booking import Booking
from hotelbook.domain.entities.booking_draft import BookingDraft
from hotelbook.domain.entities.hotel import FeaturedHotel, Hotel
from hotelbook.domain.entities.room import Room
from hotelbook.domain.entities.user import Session


@dataclass(frozen=True)
class HotelDetails:
    hotel: Hotel
    rooms: list[Room]


class HotelCatalogUseCase:
    def __init__(self, store: DataStorePort, featured: list[FeaturedHotel]) -> None:
        self._store = store
        self._featured = featured
        self._logger = logging.getLogger(__name__)

    async def list_hotels(self) -> list[Hotel]:
        try:
            rows = await self._store.fetch_many("hotels", order=("rating", False))
        except DataAccessError as e:
            self._logger.error("Error fetching hotels", extra={"error": str(e)})
            raise TransientFetchError("Failed to load hotels") from e
        return [hotel_from_record(row) for row in rows]

    def search_featured(self, search_term: str | None = None) -> list[FeaturedHotel]:
        return filter_hotels(self._featured, search_term)

    async def get_details(self, hotel_id: str) -> HotelDetails:
        try:
            hotel_row = await self._store.fetch_one("hotels", {"id": hotel_id})
            if hotel_row is None:
                raise NotFound("Hotel not found")
            room_rows = await self._store.fetch_many("rooms", {"hotel_id": hotel_id})
        except DataAccessError as e:
            self._logger.error("Error fetching hotel details", extra={"hotel_id": hotel_id, "error": str(e)})
            raise TransientFetchError("Failed to load hotel details") from e

        return HotelDetails(
            hotel=hotel_from_record(hotel_row),
            rooms=[room_from_record(row) for row in room_rows],
        )


class QuickReservationUseCase:
    """One-shot reservation from the hotel details page, without the wizard."""

    def __init__(
        self,
        catalog: HotelCatalogUseCase,
        reserve_room: ReserveRoomUseCase,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._catalog = catalog
        self._reserve_room = reserve_room
        self._today = today

    async def execute(
        self,
        session: Session,
        hotel_id: str,
        room_id: str | None,
        check_in: date,
        check_out: date,
        guests: int,
        special_requests: str = "",
    ) -> Booking:
        check_not_in_past(check_in, self._today())
        details = await self._catalog.get_details(hotel_id)
        room = next((r for r in details.rooms if r.id == room_id), None) if room_id else None
        if room_id and room is None:
            raise NotFound("Room not found")

        draft = BookingDraft(
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            special_requests=special_requests.strip(),
        )
        return await self._reserve_room.reserve(session, room, draft)
