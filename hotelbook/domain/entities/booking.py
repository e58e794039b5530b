from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Booking:
    id: str
    user_id: str
    room_id: str
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    guest_count: int
    special_requests: str = ""
    status: str = "pending"  # set externally after creation
    payment_status: str = "pending"
    created_at: datetime | None = None


@dataclass(frozen=True)
class ReservationRequest:
    user_id: str | None
    room_id: str | None
    check_in: date
    check_out: date
    total_price: Decimal
    guest_count: int
    special_requests: str = ""
