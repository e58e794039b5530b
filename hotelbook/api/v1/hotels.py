from fastapi import APIRouter, Depends, Query

from hotelbook.api.errors import to_http_exception
from hotelbook.api.v1.schemas import (
    BookingSchema,
    FeaturedHotelSchema,
    HotelDetailsSchema,
    HotelSchema,
    QuickReservationRequestSchema,
    RoomSchema,
)
from hotelbook.application.exceptions import HotelBookError
from hotelbook.application.use_cases.hotels import HotelCatalogUseCase, QuickReservationUseCase
from hotelbook.domain.entities.user import Session
from hotelbook.wiring.dependencies import get_hotel_catalog, get_quick_reservation, get_session

router = APIRouter(prefix="/hotels")


@router.get("", response_model=list[HotelSchema])
async def list_hotels(uc: HotelCatalogUseCase = Depends(get_hotel_catalog)):
    try:
        hotels = await uc.list_hotels()
    except HotelBookError as e:
        raise to_http_exception(e)
    return [HotelSchema.model_validate(h, from_attributes=True) for h in hotels]


@router.get("/featured", response_model=list[FeaturedHotelSchema])
def featured_hotels(
    q: str | None = Query(None, description="Matches hotel name or location"),
    uc: HotelCatalogUseCase = Depends(get_hotel_catalog),
):
    return [FeaturedHotelSchema.model_validate(h, from_attributes=True) for h in uc.search_featured(q)]


@router.get("/{hotel_id}", response_model=HotelDetailsSchema)
async def hotel_details(hotel_id: str, uc: HotelCatalogUseCase = Depends(get_hotel_catalog)):
    try:
        details = await uc.get_details(hotel_id)
    except HotelBookError as e:
        raise to_http_exception(e)
    return HotelDetailsSchema(
        hotel=HotelSchema.model_validate(details.hotel, from_attributes=True),
        rooms=[RoomSchema.model_validate(r, from_attributes=True) for r in details.rooms],
    )


@router.post("/{hotel_id}/reservations", response_model=BookingSchema, status_code=201)
async def reserve(
    hotel_id: str,
    req: QuickReservationRequestSchema,
    session: Session = Depends(get_session),
    uc: QuickReservationUseCase = Depends(get_quick_reservation),
):
    try:
        booking = await uc.execute(
            session=session,
            hotel_id=hotel_id,
            room_id=req.room_id,
            check_in=req.check_in,
            check_out=req.check_out,
            guests=req.guests,
            special_requests=req.special_requests,
        )
    except HotelBookError as e:
        raise to_http_exception(e)
    return BookingSchema.model_validate(booking, from_attributes=True)
