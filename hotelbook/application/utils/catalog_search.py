from __future__ import annotations

from typing import Iterable

from hotelbook.domain.entities.hotel import FeaturedHotel


def filter_hotels(hotels: Iterable[FeaturedHotel], search_term: str | None) -> list[FeaturedHotel]:
    """Case-insensitive substring match on name or location. Empty term keeps everything."""
    term = (search_term or "").strip().lower()
    if not term:
        return list(hotels)
    return [h for h in hotels if term in h.name.lower() or term in h.location.lower()]
