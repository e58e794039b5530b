from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from hotelbook.application.ports.data_store import Record
from hotelbook.domain.entities.booking import Booking, ReservationRequest
from hotelbook.domain.entities.contact_message import ContactMessage
from hotelbook.domain.entities.hotel import Hotel
from hotelbook.domain.entities.room import Room, RoomType


def _decimal(value: Any) -> Decimal:
    return Decimal(str(value if value is not None else 0))


def _date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def hotel_from_record(row: Record) -> Hotel:
    return Hotel(
        id=str(row["id"]),
        name=row.get("name") or "",
        location=row.get("location") or "",
        description=row.get("description"),
        image_url=row.get("image_url"),
        rating=float(row.get("rating") or 0),
        admin_id=str(row["admin_id"]) if row.get("admin_id") else None,
        amenities=tuple(row.get("amenities") or ()),
    )


def room_from_record(row: Record) -> Room:
    return Room(
        id=str(row["id"]),
        hotel_id=str(row.get("hotel_id") or ""),
        room_type_id=str(row["room_type_id"]) if row.get("room_type_id") else None,
        name=row.get("name") or "",
        room_number=str(row.get("room_number") or ""),
        price_per_night=_decimal(row.get("price_per_night")),
        capacity=int(row.get("capacity") or 1),
        image_url=row.get("image_url"),
    )


def room_type_from_record(row: Record) -> RoomType:
    return RoomType(
        id=str(row["id"]),
        name=row.get("name") or "",
        description=row.get("description"),
        amenities=tuple(row.get("amenities") or ()),
    )


def booking_from_record(row: Record) -> Booking:
    return Booking(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        room_id=str(row["room_id"]),
        check_in_date=_date(row["check_in_date"]),
        check_out_date=_date(row["check_out_date"]),
        total_price=_decimal(row.get("total_price")),
        guest_count=int(row.get("guest_count") or 0),
        special_requests=row.get("special_requests") or "",
        status=row.get("status") or "pending",
        payment_status=row.get("payment_status") or "pending",
        created_at=_datetime(row.get("created_at")),
    )


def reservation_to_record(request: ReservationRequest) -> Record:
    # New bookings always start pending; status changes happen elsewhere.
    return {
        "user_id": request.user_id,
        "room_id": request.room_id,
        "check_in_date": request.check_in.isoformat(),
        "check_out_date": request.check_out.isoformat(),
        "total_price": str(request.total_price),
        "guest_count": request.guest_count,
        "special_requests": request.special_requests,
        "status": "pending",
        "payment_status": "pending",
    }


def contact_message_to_record(message: ContactMessage) -> Record:
    return {
        "name": message.name,
        "email": message.email,
        "subject": message.subject,
        "message": message.message,
    }
