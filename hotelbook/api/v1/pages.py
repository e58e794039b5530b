from fastapi import APIRouter

from hotelbook.core.config import settings

router = APIRouter()


@router.get("/")
def home() -> dict[str, object]:
    return {
        "title": f"Welcome to {settings.SITE_NAME}",
        "tagline": "Experience royal hospitality across India's finest palaces and resorts.",
        "links": {"hotels": "/hotels", "featured": "/hotels/featured", "contact": "/contact", "about": "/about"},
    }


@router.get("/about")
def about() -> dict[str, object]:
    return {
        "title": f"About {settings.SITE_NAME}",
        "story": (
            "We curate heritage palaces and modern luxury hotels, pairing every stay "
            "with warm, personal service."
        ),
        "values": ["Hospitality", "Heritage", "Comfort", "Trust"],
    }
