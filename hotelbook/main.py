import logging

from fastapi import FastAPI

from hotelbook.api.v1.admin import router as admin_router
from hotelbook.api.v1.auth import router as auth_router
from hotelbook.api.v1.booking import router as booking_router
from hotelbook.api.v1.contact import router as contact_router
from hotelbook.api.v1.hotels import router as hotels_router
from hotelbook.api.v1.pages import router as pages_router
from hotelbook.core.config import settings


CONTEXT_KEYS = (
    "flow_id",
    "room_id",
    "hotel_id",
    "user_id",
    "booking_id",
    "table",
    "status",
    "reason",
    "error_code",
    "error",
)


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in CONTEXT_KEYS:
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.SITE_NAME} Hotel Booking", version="1.0.0")

app.include_router(pages_router, tags=["pages"])
app.include_router(auth_router, tags=["auth"])
app.include_router(hotels_router, tags=["hotels"])
app.include_router(booking_router, tags=["booking"])
app.include_router(contact_router, tags=["contact"])
app.include_router(admin_router, tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
