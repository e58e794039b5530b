from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from hotelbook.api.errors import to_http_exception
from hotelbook.api.v1.schemas import (
    BookingFlowSchema,
    BookingSchema,
    DraftSchema,
    DraftUpdateSchema,
    QuoteSchema,
    RoomSchema,
    RoomTypeSchema,
    SubmitResponseSchema,
)
from hotelbook.application.exceptions import HotelBookError, InvalidStayError
from hotelbook.application.ports.data_store import DataStorePort
from hotelbook.application.ports.flow_registry import FlowRegistryPort
from hotelbook.application.use_cases.booking_flow import BookingFlowController
from hotelbook.application.use_cases.reserve_room import ReserveRoomUseCase
from hotelbook.core.config import settings
from hotelbook.domain.entities.booking_draft import STEP_LABELS
from hotelbook.domain.entities.user import Session
from hotelbook.wiring.dependencies import create_booking_flow, get_flow_registry, get_session, get_session_store

router = APIRouter(prefix="/booking")
logger = logging.getLogger(__name__)


def flow_view(flow: BookingFlowController) -> BookingFlowSchema:
    state = flow.state
    quote = None
    quote_error = None
    if flow.room is not None and state.draft is not None:
        try:
            stay = flow.quote()
            quote = QuoteSchema(
                nights=stay.nights,
                price_per_night=stay.price_per_night,
                total_price=stay.total_price,
                currency_symbol=settings.CURRENCY_SYMBOL,
            )
        except InvalidStayError as e:
            quote_error = e.message

    return BookingFlowSchema(
        flow_id=flow.flow_id,
        room_id=state.room_id,
        status=state.status,
        step=state.step,
        step_label=STEP_LABELS[state.step - 1],
        steps=list(STEP_LABELS),
        busy=state.busy,
        error=state.error,
        room=RoomSchema.model_validate(flow.room, from_attributes=True) if flow.room else None,
        room_type=RoomTypeSchema.model_validate(flow.room_type, from_attributes=True) if flow.room_type else None,
        draft=DraftSchema.model_validate(state.draft, from_attributes=True) if state.draft else None,
        quote=quote,
        quote_error=quote_error,
        booking_id=state.booking_id,
    )


def _get_flow(flow_id: str, registry: FlowRegistryPort) -> BookingFlowController:
    flow = registry.get(flow_id)
    if flow is None:
        raise HTTPException(status_code=404, detail="Booking session not found")
    return flow


@router.post("/{room_id}", response_model=BookingFlowSchema, status_code=201)
async def open_flow(
    room_id: str,
    store: DataStorePort = Depends(get_session_store),
    registry: FlowRegistryPort = Depends(get_flow_registry),
):
    flow = create_booking_flow(room_id, store)
    registry.add(flow)
    try:
        await flow.load()
    except HotelBookError as e:
        # Not-found and load failures are terminal for this flow.
        registry.remove(flow.flow_id)
        flow.discard()
        raise to_http_exception(e)
    logger.info("Booking flow opened", extra={"flow_id": flow.flow_id, "room_id": room_id})
    return flow_view(flow)


@router.get("/flows/{flow_id}", response_model=BookingFlowSchema)
async def get_flow(flow_id: str, registry: FlowRegistryPort = Depends(get_flow_registry)):
    return flow_view(_get_flow(flow_id, registry))


@router.patch("/flows/{flow_id}/draft", response_model=BookingFlowSchema)
async def update_draft(
    flow_id: str,
    req: DraftUpdateSchema,
    registry: FlowRegistryPort = Depends(get_flow_registry),
):
    flow = _get_flow(flow_id, registry)
    changes = req.model_dump(exclude_unset=True, exclude_none=True)
    if "payment_method" in changes:
        changes["payment_method"] = req.payment_method.value
    try:
        flow.update_draft(changes)
    except HotelBookError as e:
        raise to_http_exception(e)
    return flow_view(flow)


@router.post("/flows/{flow_id}/advance", response_model=BookingFlowSchema)
async def advance(flow_id: str, registry: FlowRegistryPort = Depends(get_flow_registry)):
    flow = _get_flow(flow_id, registry)
    try:
        flow.advance()
    except HotelBookError as e:
        raise to_http_exception(e)
    return flow_view(flow)


@router.post("/flows/{flow_id}/retreat", response_model=BookingFlowSchema)
async def retreat(flow_id: str, registry: FlowRegistryPort = Depends(get_flow_registry)):
    flow = _get_flow(flow_id, registry)
    try:
        flow.retreat()
    except HotelBookError as e:
        raise to_http_exception(e)
    return flow_view(flow)


@router.post("/flows/{flow_id}/submit", response_model=SubmitResponseSchema)
async def submit(
    flow_id: str,
    session: Session = Depends(get_session),
    store: DataStorePort = Depends(get_session_store),
    registry: FlowRegistryPort = Depends(get_flow_registry),
):
    flow = _get_flow(flow_id, registry)
    try:
        booking = await flow.submit(session, reserve_room=ReserveRoomUseCase(store=store))
    except HotelBookError as e:
        raise to_http_exception(e)

    # The draft is replaced by the persisted booking.
    registry.remove(flow_id)
    return SubmitResponseSchema(
        booking=BookingSchema.model_validate(booking, from_attributes=True),
        redirect_to=settings.BOOKING_CONFIRMATION_ROUTE,
    )


@router.delete("/flows/{flow_id}", status_code=204)
async def discard(flow_id: str, registry: FlowRegistryPort = Depends(get_flow_registry)):
    flow = registry.remove(flow_id)
    if flow is not None:
        flow.discard()
    return Response(status_code=204)
