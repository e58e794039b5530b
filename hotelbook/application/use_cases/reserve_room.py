from __future__ import annotations

import logging

from hotelbook.application.exceptions import DataAccessError, NoRoomSelected, SubmissionError, Unauthenticated
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.utils.draft_rules import check_guest_count
from hotelbook.application.utils.records import booking_from_record, reservation_to_record
from hotelbook.application.utils.stay_pricing import quote_stay
from hotelbook.domain.entities.booking import Booking, ReservationRequest
from hotelbook.domain.entities.booking_draft import BookingDraft
from hotelbook.domain.entities.room import Room
from hotelbook.domain.entities.user import Session


class ReserveRoomUseCase:
    """Writes exactly one `bookings` row per call. There is no idempotency key."""

    def __init__(self, store: DataStorePort) -> None:
        self._store = store
        self._logger = logging.getLogger(__name__)

    def build_request(self, session: Session, room: Room | None, draft: BookingDraft) -> ReservationRequest:
        """Check preconditions, validate the draft against the room and price the stay."""
        if not session.user_id:
            raise Unauthenticated("Please sign in to complete your booking")
        if room is None or not room.id:
            raise NoRoomSelected()

        check_guest_count(draft.guests, room)
        quote = quote_stay(room, draft.check_in, draft.check_out)
        return ReservationRequest(
            user_id=session.user_id,
            room_id=room.id,
            check_in=draft.check_in,
            check_out=draft.check_out,
            total_price=quote.total_price,
            guest_count=draft.guests,
            special_requests=draft.special_requests,
        )

    async def execute(self, request: ReservationRequest) -> Booking:
        if not request.user_id:
            raise Unauthenticated("Please sign in to complete your booking")
        if not request.room_id:
            raise NoRoomSelected()

        try:
            row = await self._store.insert("bookings", reservation_to_record(request))
        except DataAccessError as e:
            self._logger.error(
                "Error creating booking",
                extra={"room_id": request.room_id, "user_id": request.user_id, "error": str(e)},
            )
            raise SubmissionError() from e

        booking = booking_from_record(row)
        self._logger.info(
            "Booking created",
            extra={"room_id": booking.room_id, "user_id": booking.user_id, "booking_id": booking.id},
        )
        return booking

    async def reserve(self, session: Session, room: Room | None, draft: BookingDraft) -> Booking:
        return await self.execute(self.build_request(session, room, draft))
