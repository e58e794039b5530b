from functools import lru_cache
import logging
import uuid

from fastapi import Depends, Header, HTTPException

from hotelbook.core.config import settings
from hotelbook.application.exceptions import DataAccessError
from hotelbook.application.ports.auth import AuthPort
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.ports.flow_registry import FlowRegistryPort
from hotelbook.application.use_cases.admin_dashboard import AdminDashboardUseCase
from hotelbook.application.use_cases.booking_flow import BookingFlowController
from hotelbook.application.use_cases.contact import SendContactMessageUseCase
from hotelbook.application.use_cases.hotels import HotelCatalogUseCase, QuickReservationUseCase
from hotelbook.application.use_cases.load_room import LoadRoomUseCase
from hotelbook.application.use_cases.reserve_room import ReserveRoomUseCase
from hotelbook.domain.entities.user import Session
from hotelbook.infrastructure.auth.memory_auth import MemoryAuth
from hotelbook.infrastructure.catalog.featured_hotels import FEATURED_HOTELS
from hotelbook.infrastructure.store.demo_data import (
    DEMO_ADMIN_EMAIL,
    DEMO_ADMIN_ID,
    DEMO_ADMIN_PASSWORD,
    DEMO_TABLES,
)
from hotelbook.infrastructure.store.flow_registry import MemoryFlowRegistry
from hotelbook.infrastructure.store.memory_store import MemoryDataStore
from hotelbook.infrastructure.supabase.auth_client import SupabaseAuth
from hotelbook.infrastructure.supabase.rest_store import SupabaseDataStore


logger = logging.getLogger(__name__)


def _use_supabase() -> bool:
    if settings.DATA_BACKEND.lower() != "supabase":
        return False
    if not (settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY):
        if settings.ENV.lower() in {"dev", "local"}:
            logger.warning("Supabase credentials missing; falling back to in-memory store (ENV=dev/local)")
            return False
        raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required when DATA_BACKEND=supabase")
    return True


@lru_cache
def get_data_store() -> DataStorePort:
    if _use_supabase():
        logger.info("Using SupabaseDataStore")
        return SupabaseDataStore()
    logger.info("Using MemoryDataStore with demo data")
    return MemoryDataStore(DEMO_TABLES)


@lru_cache
def get_auth() -> AuthPort:
    if _use_supabase():
        return SupabaseAuth()
    return MemoryAuth({DEMO_ADMIN_EMAIL: (DEMO_ADMIN_ID, DEMO_ADMIN_PASSWORD)})


@lru_cache
def get_flow_registry() -> FlowRegistryPort:
    return MemoryFlowRegistry()


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def get_session(
    authorization: str | None = Header(None),
    auth: AuthPort = Depends(get_auth),
) -> Session:
    token = _bearer_token(authorization)
    if not token:
        return Session()
    try:
        user = await auth.get_user(token)
    except DataAccessError as e:
        raise HTTPException(status_code=502, detail=e.message)
    if user is None:
        return Session()
    return Session(user=user, access_token=token)


def get_session_store(
    session: Session = Depends(get_session),
    store: DataStorePort = Depends(get_data_store),
) -> DataStorePort:
    return store.with_session(session.access_token)


def get_hotel_catalog(store: DataStorePort = Depends(get_session_store)) -> HotelCatalogUseCase:
    return HotelCatalogUseCase(store=store, featured=FEATURED_HOTELS)


def get_quick_reservation(
    store: DataStorePort = Depends(get_session_store),
) -> QuickReservationUseCase:
    return QuickReservationUseCase(
        catalog=HotelCatalogUseCase(store=store, featured=FEATURED_HOTELS),
        reserve_room=ReserveRoomUseCase(store=store),
    )


def get_contact_use_case(store: DataStorePort = Depends(get_session_store)) -> SendContactMessageUseCase:
    return SendContactMessageUseCase(store=store)


def get_admin_dashboard_use_case(store: DataStorePort = Depends(get_session_store)) -> AdminDashboardUseCase:
    return AdminDashboardUseCase(store=store)


def create_booking_flow(room_id: str, store: DataStorePort) -> BookingFlowController:
    return BookingFlowController(
        flow_id=uuid.uuid4().hex,
        room_id=room_id,
        load_room=LoadRoomUseCase(store=store),
        reserve_room=ReserveRoomUseCase(store=store),
    )
