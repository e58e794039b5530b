from __future__ import annotations

from hotelbook.application.ports.data_store import Record

DEMO_ADMIN_ID = "00000000-0000-0000-0000-000000000001"
DEMO_ADMIN_EMAIL = "admin@demo.com"
DEMO_ADMIN_PASSWORD = "admin123"

DEMO_TABLES: dict[str, list[Record]] = {
    "hotels": [
        {
            "id": "1",
            "name": "Taj Lake Palace",
            "location": "Udaipur, Rajasthan",
            "description": "A floating marvel on Lake Pichola, this 18th-century palace offers royal Rajasthani luxury.",
            "image_url": "https://images.unsplash.com/photo-1566737236500-c8ac43014a67?auto=format&fit=crop&w=1950&q=80",
            "rating": 5,
            "admin_id": DEMO_ADMIN_ID,
            "amenities": ["Spa", "Pool", "Fine Dining", "Lake View"],
        },
        {
            "id": "2",
            "name": "The Oberoi Amarvilas",
            "location": "Agra, Uttar Pradesh",
            "description": "Every room offers a breathtaking view of the Taj Mahal, just 600 meters away.",
            "image_url": "https://images.unsplash.com/photo-1582719508461-905c673771fd?auto=format&fit=crop&w=1950&q=80",
            "rating": 5,
            "admin_id": DEMO_ADMIN_ID,
            "amenities": ["Taj View", "Spa", "Pool", "Butler Service"],
        },
        {
            "id": "3",
            "name": "The Leela Palace",
            "location": "New Delhi",
            "description": "A modern palace in the diplomatic enclave of New Delhi.",
            "image_url": "https://images.unsplash.com/photo-1542314831-068cd1dbfeeb?auto=format&fit=crop&w=1950&q=80",
            "rating": 4,
            "admin_id": None,
            "amenities": ["Rooftop Pool", "Spa", "Fine Dining", "Butler Service"],
        },
    ],
    "room_types": [
        {"id": "rt-deluxe", "name": "Deluxe", "description": "King bed with a garden view", "amenities": ["Free WiFi", "Breakfast", "AC"]},
        {"id": "rt-suite", "name": "Royal Suite", "description": "Two bedrooms, panoramic view", "amenities": ["Free WiFi", "Breakfast", "AC", "TV"]},
    ],
    "rooms": [
        {"id": "101", "hotel_id": "1", "room_type_id": "rt-deluxe", "name": "Lake View Deluxe", "room_number": "101", "price_per_night": "35000", "capacity": 2},
        {"id": "102", "hotel_id": "1", "room_type_id": "rt-suite", "name": "Grand Royal Suite", "room_number": "102", "price_per_night": "85000", "capacity": 4},
        {"id": "201", "hotel_id": "2", "room_type_id": "rt-deluxe", "name": "Taj View Deluxe", "room_number": "201", "price_per_night": "45000", "capacity": 2},
        {"id": "301", "hotel_id": "3", "room_type_id": "rt-suite", "name": "Palace Suite", "room_number": "301", "price_per_night": "30000", "capacity": 3},
    ],
    "bookings": [],
    "contact_messages": [],
}
