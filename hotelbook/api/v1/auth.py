from fastapi import APIRouter, Depends, HTTPException

from hotelbook.api.errors import to_http_exception
from hotelbook.api.v1.schemas import LoginRequestSchema, SessionSchema
from hotelbook.application.exceptions import HotelBookError
from hotelbook.application.ports.auth import AuthPort
from hotelbook.domain.entities.user import Session
from hotelbook.wiring.dependencies import get_auth, get_session

router = APIRouter(prefix="/auth")


@router.post("/login", response_model=SessionSchema)
async def login(req: LoginRequestSchema, auth: AuthPort = Depends(get_auth)):
    try:
        session = await auth.sign_in(req.email, req.password)
    except HotelBookError as e:
        raise to_http_exception(e)
    return SessionSchema(user_id=session.user_id, email=session.user.email, access_token=session.access_token)


@router.post("/logout", status_code=204)
async def logout(session: Session = Depends(get_session), auth: AuthPort = Depends(get_auth)):
    try:
        await auth.sign_out(session)
    except HotelBookError as e:
        raise to_http_exception(e)


@router.get("/me", response_model=SessionSchema)
def me(session: Session = Depends(get_session)):
    if not session.is_authenticated:
        raise HTTPException(status_code=401, detail="Not signed in")
    return SessionSchema(user_id=session.user_id, email=session.user.email)
