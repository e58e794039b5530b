from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, EmailStr, Field


class PaymentMethod(str, Enum):
    card = "card"
    upi = "upi"
    netbanking = "netbanking"


class LoginRequestSchema(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class SessionSchema(BaseModel):
    user_id: str
    email: str | None = None
    access_token: str | None = None


class HotelSchema(BaseModel):
    id: str
    name: str
    location: str
    description: str | None = None
    image_url: str | None = None
    rating: float = 0
    amenities: list[str] = Field(default_factory=list)


class FeaturedHotelSchema(HotelSchema):
    price_per_night: Decimal


class RoomSchema(BaseModel):
    id: str
    hotel_id: str
    room_type_id: str | None = None
    name: str
    room_number: str
    price_per_night: Decimal
    capacity: int
    image_url: str | None = None


class RoomTypeSchema(BaseModel):
    id: str
    name: str
    description: str | None = None
    amenities: list[str] = Field(default_factory=list)


class HotelDetailsSchema(BaseModel):
    hotel: HotelSchema
    rooms: list[RoomSchema]


class BookingSchema(BaseModel):
    id: str
    user_id: str
    room_id: str
    check_in_date: date
    check_out_date: date
    total_price: Decimal
    guest_count: int
    special_requests: str = ""
    status: str
    payment_status: str
    created_at: datetime | None = None


class QuickReservationRequestSchema(BaseModel):
    room_id: str | None = None
    check_in: date
    check_out: date
    guests: int = 2
    special_requests: str = ""


class DraftSchema(BaseModel):
    check_in: date
    check_out: date
    guests: int
    special_requests: str = ""
    payment_method: PaymentMethod = PaymentMethod.card


class DraftUpdateSchema(BaseModel):
    check_in: date | None = None
    check_out: date | None = None
    guests: int | None = None
    special_requests: str | None = None
    payment_method: PaymentMethod | None = None


class QuoteSchema(BaseModel):
    nights: int
    price_per_night: Decimal
    total_price: Decimal
    currency_symbol: str


class BookingFlowSchema(BaseModel):
    flow_id: str
    room_id: str
    status: str
    step: int
    step_label: str
    steps: list[str]
    busy: bool
    error: str | None = None
    room: RoomSchema | None = None
    room_type: RoomTypeSchema | None = None
    draft: DraftSchema | None = None
    quote: QuoteSchema | None = None
    quote_error: str | None = None
    booking_id: str | None = None


class SubmitResponseSchema(BaseModel):
    booking: BookingSchema
    redirect_to: str


class ContactRequestSchema(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactResponseSchema(BaseModel):
    success: bool
    message: str


class DashboardStatsSchema(BaseModel):
    total_hotels: int
    total_rooms: int
    active_bookings: int


class AdminDashboardSchema(BaseModel):
    stats: DashboardStatsSchema
    hotels: list[HotelSchema]
    rooms: list[RoomSchema]
    bookings: list[BookingSchema]
