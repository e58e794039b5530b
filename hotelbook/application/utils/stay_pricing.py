from __future__ import annotations

from datetime import date
from decimal import Decimal

from hotelbook.application.exceptions import InvalidStayError
from hotelbook.domain.entities.booking_draft import StayQuote
from hotelbook.domain.entities.room import Room


def nights_between(check_in: date, check_out: date) -> int:
    """Number of nights in a stay. Raises InvalidStayError unless check_out > check_in."""
    nights = (check_out - check_in).days
    if nights <= 0:
        raise InvalidStayError()
    return nights


def total_price(price_per_night: Decimal, check_in: date, check_out: date) -> Decimal:
    return Decimal(price_per_night) * nights_between(check_in, check_out)


def quote_stay(room: Room, check_in: date, check_out: date) -> StayQuote:
    return StayQuote(
        nights=nights_between(check_in, check_out),
        price_per_night=room.price_per_night,
        total_price=total_price(room.price_per_night, check_in, check_out),
    )
