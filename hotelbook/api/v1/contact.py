from fastapi import APIRouter, Depends

from hotelbook.api.errors import to_http_exception
from hotelbook.api.v1.schemas import ContactRequestSchema, ContactResponseSchema
from hotelbook.application.exceptions import HotelBookError
from hotelbook.application.use_cases.contact import SendContactMessageUseCase
from hotelbook.wiring.dependencies import get_contact_use_case

router = APIRouter()


@router.post("/contact", response_model=ContactResponseSchema, status_code=201)
async def send_message(
    req: ContactRequestSchema,
    uc: SendContactMessageUseCase = Depends(get_contact_use_case),
):
    try:
        await uc.execute(name=req.name, email=req.email, subject=req.subject, message=req.message)
    except HotelBookError as e:
        raise to_http_exception(e)
    return ContactResponseSchema(success=True, message="Thank you! Your message has been sent.")
