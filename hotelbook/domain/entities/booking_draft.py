from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

PAYMENT_METHODS = {
    "card": "Credit/Debit Card",
    "upi": "UPI Payment",
    "netbanking": "Net Banking",
}

STEP_LABELS = ("Room Details", "Guest Information", "Payment")
FIRST_STEP = 1
LAST_STEP = len(STEP_LABELS)


@dataclass(frozen=True)
class BookingDraft:
    check_in: date
    check_out: date
    guests: int
    special_requests: str = ""
    payment_method: str = "card"  # label only, no payment integration


@dataclass(frozen=True)
class StayQuote:
    nights: int
    price_per_night: Decimal
    total_price: Decimal
