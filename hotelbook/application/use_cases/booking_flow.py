from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Callable

from hotelbook.application.exceptions import (
    FlowCompleted,
    HotelBookError,
    NotFound,
    StaleFlowError,
    StepError,
    SubmissionInProgress,
    TransientFetchError,
)
from hotelbook.application.use_cases.load_room import LoadRoomUseCase
from hotelbook.application.use_cases.reserve_room import ReserveRoomUseCase
from hotelbook.application.utils.draft_rules import apply_draft_changes, default_draft
from hotelbook.application.utils.stay_pricing import quote_stay
from hotelbook.domain.entities.booking import Booking
from hotelbook.domain.entities.booking_draft import FIRST_STEP, LAST_STEP, BookingDraft, StayQuote
from hotelbook.domain.entities.room import Room, RoomType
from hotelbook.domain.entities.user import Session


@dataclass(frozen=True)
class BookingFlowState:
    room_id: str
    status: str = "loading"  # "loading", "ready", "not_found", "load_failed", "submitting", "completed"
    step: int = FIRST_STEP
    draft: BookingDraft | None = None
    error: str | None = None
    booking_id: str | None = None

    @property
    def busy(self) -> bool:
        return self.status in {"loading", "submitting"}


# Pure transitions. Each returns a new state or raises; none does I/O.


def advance(state: BookingFlowState) -> BookingFlowState:
    if state.status == "completed":
        raise FlowCompleted()
    if state.status != "ready":
        raise StepError("Please wait for the current request to finish")
    if state.step >= LAST_STEP:
        return state
    return replace(state, step=state.step + 1, error=None)


def retreat(state: BookingFlowState) -> BookingFlowState:
    if state.status == "completed":
        raise FlowCompleted()
    if state.status not in {"ready", "submitting"}:
        raise StepError()
    if state.step <= FIRST_STEP:
        return state
    return replace(state, step=state.step - 1, error=None)


def with_draft(state: BookingFlowState, draft: BookingDraft) -> BookingFlowState:
    if state.status == "completed":
        raise FlowCompleted()
    if state.status != "ready":
        raise StepError("Booking details cannot change while a request is pending")
    return replace(state, draft=draft)


def begin_submit(state: BookingFlowState) -> BookingFlowState:
    if state.status == "completed":
        raise FlowCompleted()
    if state.status == "submitting":
        raise SubmissionInProgress()
    if state.status != "ready":
        raise StepError()
    if state.step != LAST_STEP:
        raise StepError("Booking can only be confirmed on the payment step")
    return replace(state, status="submitting", error=None)


def submit_succeeded(state: BookingFlowState, booking_id: str) -> BookingFlowState:
    return replace(state, status="completed", booking_id=booking_id, error=None)


def submit_failed(state: BookingFlowState, message: str) -> BookingFlowState:
    return replace(state, status="ready", error=message)


def with_error(state: BookingFlowState, message: str) -> BookingFlowState:
    return replace(state, error=message)


class BookingFlowController:
    """
    Owns one booking wizard over a single room.

    A generation counter guards every await: `discard()` or a reload bumps it,
    and results that come back for an older generation are dropped.
    """

    def __init__(
        self,
        flow_id: str,
        room_id: str,
        load_room: LoadRoomUseCase,
        reserve_room: ReserveRoomUseCase,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.flow_id = flow_id
        self.state = BookingFlowState(room_id=room_id)
        self.room: Room | None = None
        self.room_type: RoomType | None = None
        self._load_room = load_room
        self._reserve_room = reserve_room
        self._today = today
        self._generation = 0
        self._discarded = False
        self._logger = logging.getLogger(__name__)

    @property
    def discarded(self) -> bool:
        return self._discarded

    async def load(self) -> BookingFlowState:
        self._ensure_active()
        self._generation += 1
        generation = self._generation
        self.state = BookingFlowState(room_id=self.state.room_id)

        try:
            details = await self._load_room.execute(self.state.room_id)
        except NotFound as e:
            self._apply(generation, replace(self.state, status="not_found", error=e.message))
            raise
        except TransientFetchError as e:
            self._apply(generation, replace(self.state, status="load_failed", error=e.message))
            raise

        self._check_generation(generation)
        self.room = details.room
        self.room_type = details.room_type
        self.state = replace(
            self.state,
            status="ready",
            draft=default_draft(details.room, self._today()),
            error=None,
        )
        self._logger.info("Booking flow loaded", extra={"flow_id": self.flow_id, "room_id": self.room.id})
        return self.state

    def update_draft(self, changes: dict[str, Any]) -> BookingFlowState:
        self._ensure_active()
        if self.room is None or self.state.draft is None:
            raise StepError("Room details are not loaded")
        draft = apply_draft_changes(self.state.draft, changes, self.room, self._today())
        self.state = with_draft(self.state, draft)
        return self.state

    def advance(self) -> BookingFlowState:
        self._ensure_active()
        self.state = advance(self.state)
        return self.state

    def retreat(self) -> BookingFlowState:
        self._ensure_active()
        self.state = retreat(self.state)
        return self.state

    def quote(self) -> StayQuote:
        if self.room is None or self.state.draft is None:
            raise StepError("Room details are not loaded")
        return quote_stay(self.room, self.state.draft.check_in, self.state.draft.check_out)

    async def submit(self, session: Session, reserve_room: ReserveRoomUseCase | None = None) -> Booking:
        """Submit the draft. `reserve_room` overrides the writer, e.g. one bound to the caller's token."""
        self._ensure_active()
        reserve_room = reserve_room or self._reserve_room
        pending = begin_submit(self.state)

        try:
            request = reserve_room.build_request(session, self.room, self.state.draft)
        except HotelBookError as e:
            self._logger.info(
                "Booking submission blocked",
                extra={"flow_id": self.flow_id, "reason": type(e).__name__},
            )
            self.state = with_error(self.state, e.message)
            raise

        self.state = pending
        generation = self._generation
        try:
            booking = await reserve_room.execute(request)
        except HotelBookError as e:
            self._apply(generation, submit_failed(self.state, e.message))
            raise

        self._check_generation(generation)
        self.state = submit_succeeded(self.state, booking.id)
        return booking

    def discard(self) -> None:
        self._generation += 1
        self._discarded = True
        self._logger.info("Booking flow discarded", extra={"flow_id": self.flow_id})

    def _ensure_active(self) -> None:
        if self._discarded:
            raise StaleFlowError()

    def _apply(self, generation: int, state: BookingFlowState) -> None:
        if generation == self._generation:
            self.state = state
        else:
            self._logger.info("Dropping stale flow update", extra={"flow_id": self.flow_id})

    def _check_generation(self, generation: int) -> None:
        if generation != self._generation:
            self._logger.info("Dropping stale flow result", extra={"flow_id": self.flow_id})
            raise StaleFlowError()
