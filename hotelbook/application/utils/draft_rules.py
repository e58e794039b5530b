from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Any

from hotelbook.application.exceptions import InvalidDraftError, InvalidGuestCountError, InvalidStayError
from hotelbook.domain.entities.booking_draft import PAYMENT_METHODS, BookingDraft
from hotelbook.domain.entities.room import Room

DEFAULT_GUESTS = 2
EDITABLE_FIELDS = ("check_in", "check_out", "guests", "special_requests", "payment_method")


def default_draft(room: Room, today: date) -> BookingDraft:
    return BookingDraft(
        check_in=today + timedelta(days=1),
        check_out=today + timedelta(days=2),
        guests=max(1, min(DEFAULT_GUESTS, room.capacity)),
    )


def check_guest_count(guests: int, room: Room) -> int:
    if guests < 1 or guests > room.capacity:
        raise InvalidGuestCountError(f"Number of guests must be between 1 and {room.capacity}")
    return guests


def check_not_in_past(check_in: date, today: date) -> date:
    if check_in < today:
        raise InvalidStayError("Check-in date cannot be in the past")
    return check_in


def apply_draft_changes(draft: BookingDraft, changes: dict[str, Any], room: Room, today: date) -> BookingDraft:
    """
    Return a new draft with `changes` applied.

    Field-level constraints only: check-in not in the past, guests within
    capacity, known payment method. Date ordering is checked when the stay is
    priced, so check-in and check-out can be edited one at a time.
    """
    unknown = set(changes) - set(EDITABLE_FIELDS)
    if unknown:
        raise InvalidDraftError(f"Unknown booking field(s): {', '.join(sorted(unknown))}")

    updates = {key: value for key, value in changes.items() if value is not None}

    if "check_in" in updates:
        check_not_in_past(updates["check_in"], today)
    if "guests" in updates:
        check_guest_count(int(updates["guests"]), room)
    if "payment_method" in updates:
        method = str(updates["payment_method"]).strip().lower()
        if method not in PAYMENT_METHODS:
            raise InvalidDraftError(f"Unsupported payment method: {updates['payment_method']}")
        updates["payment_method"] = method
    if "special_requests" in updates:
        updates["special_requests"] = str(updates["special_requests"]).strip()

    return replace(draft, **updates)
