from __future__ import annotations

from decimal import Decimal

from hotelbook.domain.entities.hotel import FeaturedHotel

FEATURED_HOTELS: list[FeaturedHotel] = [
    FeaturedHotel(
        id="1",
        name="Taj Lake Palace",
        location="Udaipur, Rajasthan",
        description="A floating marvel on Lake Pichola, this 18th-century palace offers royal Rajasthani luxury.",
        image_url="https://images.unsplash.com/photo-1566737236500-c8ac43014a67?auto=format&fit=crop&w=1950&q=80",
        rating=5,
        price_per_night=Decimal("35000"),
        amenities=("Spa", "Pool", "Fine Dining", "Lake View"),
    ),
    FeaturedHotel(
        id="2",
        name="The Oberoi Amarvilas",
        location="Agra, Uttar Pradesh",
        description="Every room offers a breathtaking view of the Taj Mahal, just 600 meters away.",
        image_url="https://images.unsplash.com/photo-1582719508461-905c673771fd?auto=format&fit=crop&w=1950&q=80",
        rating=5,
        price_per_night=Decimal("45000"),
        amenities=("Taj View", "Spa", "Pool", "Butler Service"),
    ),
    FeaturedHotel(
        id="3",
        name="The Leela Palace",
        location="New Delhi",
        description="A modern palace in the diplomatic enclave of New Delhi.",
        image_url="https://images.unsplash.com/photo-1542314831-068cd1dbfeeb?auto=format&fit=crop&w=1950&q=80",
        rating=5,
        price_per_night=Decimal("30000"),
        amenities=("Rooftop Pool", "Spa", "Fine Dining", "Butler Service"),
    ),
]
