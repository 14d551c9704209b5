from __future__ import annotations
import structlog
from app.schemas.room import RoomWrite

log = structlog.get_logger()

SAMPLE_ROOMS: list[dict] = [
    {"number": "101", "type": "Standard", "capacity": 2, "price": 99.0,
     "amenities": ["WiFi", "TV", "Air Conditioning"], "status": "available"},
    {"number": "102", "type": "Standard", "capacity": 2, "price": 99.0,
     "amenities": ["WiFi", "TV"], "status": "occupied"},
    {"number": "201", "type": "Deluxe", "capacity": 3, "price": 149.0,
     "amenities": ["WiFi", "TV", "Mini Bar", "Air Conditioning"], "status": "available"},
    {"number": "202", "type": "Deluxe", "capacity": 3, "price": 159.0,
     "amenities": ["WiFi", "TV", "Mini Bar", "Balcony"], "status": "maintenance"},
    {"number": "301", "type": "Suite", "capacity": 4, "price": 299.0,
     "amenities": ["WiFi", "TV", "Mini Bar", "Jacuzzi", "Ocean View"], "status": "available"},
]


async def seed_rooms(store) -> int:
    """Load SAMPLE_ROOMS into an empty store. Returns how many rows were written."""
    from app.services.records import count_rooms, create_room

    if await count_rooms(store):
        return 0
    for raw in SAMPLE_ROOMS:
        await create_room(store, RoomWrite.model_validate(raw))
    log.info("rooms_seeded", count=len(SAMPLE_ROOMS))
    return len(SAMPLE_ROOMS)
