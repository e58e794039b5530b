from fastapi import APIRouter, Depends

from hotelbook.api.errors import to_http_exception
from hotelbook.api.v1.schemas import (
    AdminDashboardSchema,
    BookingSchema,
    DashboardStatsSchema,
    HotelSchema,
    RoomSchema,
)
from hotelbook.application.exceptions import HotelBookError
from hotelbook.application.use_cases.admin_dashboard import AdminDashboardUseCase
from hotelbook.domain.entities.user import Session
from hotelbook.wiring.dependencies import get_admin_dashboard_use_case, get_session

router = APIRouter(prefix="/admin")


@router.get("/dashboard", response_model=AdminDashboardSchema)
async def dashboard(
    session: Session = Depends(get_session),
    uc: AdminDashboardUseCase = Depends(get_admin_dashboard_use_case),
):
    try:
        data = await uc.execute(session)
    except HotelBookError as e:
        raise to_http_exception(e)

    stats = data.stats
    return AdminDashboardSchema(
        stats=DashboardStatsSchema(
            total_hotels=stats.total_hotels,
            total_rooms=stats.total_rooms,
            active_bookings=stats.active_bookings,
        ),
        hotels=[HotelSchema.model_validate(h, from_attributes=True) for h in data.hotels],
        rooms=[RoomSchema.model_validate(r, from_attributes=True) for r in data.rooms],
        bookings=[BookingSchema.model_validate(b, from_attributes=True) for b in data.bookings],
    )
