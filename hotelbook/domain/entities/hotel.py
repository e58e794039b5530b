from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Hotel:
    id: str
    name: str
    location: str
    description: str | None = None
    image_url: str | None = None
    rating: float = 0
    admin_id: str | None = None
    amenities: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FeaturedHotel:
    """Hard-coded showcase entry rendered on the hotels page."""

    id: str
    name: str
    location: str
    description: str
    image_url: str
    rating: float
    price_per_night: Decimal
    amenities: Tuple[str, ...] = ()
