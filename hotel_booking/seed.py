import logging
from sqlalchemy.orm import Session
from hotel_booking import storage

logger = logging.getLogger(__name__)

SEED_HOTELS = [
    {
        "hotel": {
            "name": "Grand Plaza Hotel",
            "description": "Luxury stay in the heart of the city.",
            "address": "123 Main St, New York, NY",
            "rating": 5,
            "min_price": 200,
            "image_url": "https://images.unsplash.com/photo-1566073771259-6a8506099945?auto=format&fit=crop&w=800&q=80",
        },
        "rooms": [
            {
                "name": "Executive Suite",
                "type": "Suite",
                "capacity": 2,
                "price": 350,
                "image_url": "https://images.unsplash.com/photo-1631049307204-6c0b3b44b20a?auto=format&fit=crop&w=800&q=80",
            },
            {
                "name": "Standard King",
                "type": "Double",
                "capacity": 2,
                "price": 200,
                "image_url": "https://images.unsplash.com/photo-1590490360182-c33d57733427?auto=format&fit=crop&w=800&q=80",
            },
        ],
    },
    {
        "hotel": {
            "name": "Seaside Resort",
            "description": "Relax by the ocean with stunning views.",
            "address": "45 Ocean Dr, Miami, FL",
            "rating": 4,
            "min_price": 150,
            "image_url": "https://images.unsplash.com/photo-1520250497591-112f2f40a3f4?auto=format&fit=crop&w=800&q=80",
        },
        "rooms": [
            {
                "name": "Ocean View Room",
                "type": "Double",
                "capacity": 2,
                "price": 250,
                "image_url": "https://images.unsplash.com/photo-1582719478250-c89cae4dc85b?auto=format&fit=crop&w=800&q=80",
            },
        ],
    },
    {
        "hotel": {
            "name": "Mountain Lodge",
            "description": "Cozy cabin vibes with modern amenities.",
            "address": "789 Pine Way, Denver, CO",
            "rating": 4,
            "min_price": 120,
            "image_url": "https://images.unsplash.com/photo-1445019980597-93fa8acb246c?auto=format&fit=crop&w=800&q=80",
        },
        "rooms": [],
    },
]


def seed_database(db: Session):
    """Fill an empty catalog with sample hotels. Returns the number of hotels added."""
    if storage.get_hotels(db):
        logger.debug("Catalog already populated, skipping seed")
        return 0
    for entry in SEED_HOTELS:
        hotel = storage.create_hotel(db, entry["hotel"])
        for room in entry["rooms"]:
            storage.create_room(db, {**room, "hotel_id": hotel.id})
    logger.info(f"Seeded {len(SEED_HOTELS)} hotels")
    return len(SEED_HOTELS)
