from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Room:
    id: str
    hotel_id: str
    room_type_id: str | None
    name: str
    room_number: str
    price_per_night: Decimal
    capacity: int
    image_url: str | None = None


@dataclass(frozen=True)
class RoomType:
    id: str
    name: str
    description: str | None = None
    amenities: Tuple[str, ...] = ()
