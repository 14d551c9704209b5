from __future__ import annotations
from typing import Any
from fastapi import APIRouter, Body, Depends
from app.db import Store, get_store
from app.errors import NotFound
from app.schemas.common import Envelope, ListEnvelope, MessageEnvelope
from app.schemas.room import RoomPublic
from app.services import records
from app.services.transform import room_to_public
from app.services.validation import validate_room

router = APIRouter(prefix="/api/rooms", tags=["rooms"])

def _not_found(room_id: int) -> NotFound:
    return NotFound(f"Room {room_id} not found", {"id": room_id})

@router.get("", response_model=ListEnvelope[RoomPublic])
async def list_all(store: Store = Depends(get_store)):
    rows = await records.list_rooms(store)
    data = [room_to_public(r) for r in rows]
    return ListEnvelope[RoomPublic](count=len(data), data=data)

@router.get("/{room_id}", response_model=Envelope[RoomPublic])
async def get_one(room_id: int, store: Store = Depends(get_store)):
    room = await records.get_room(store, room_id)
    if room is None:
        raise _not_found(room_id)
    return Envelope[RoomPublic](data=room_to_public(room))

@router.post("", response_model=Envelope[RoomPublic], status_code=201)
async def create(payload: Any = Body(None), store: Store = Depends(get_store)):
    room = await records.create_room(store, validate_room(payload))
    return Envelope[RoomPublic](data=room_to_public(room), message="Room created successfully")

@router.put("/{room_id}", response_model=Envelope[RoomPublic])
async def update(room_id: int, payload: Any = Body(None), store: Store = Depends(get_store)):
    room = await records.update_room(store, room_id, validate_room(payload))
    if room is None:
        raise _not_found(room_id)
    return Envelope[RoomPublic](data=room_to_public(room), message="Room updated successfully")

@router.delete("/{room_id}", response_model=MessageEnvelope)
async def delete(room_id: int, store: Store = Depends(get_store)):
    if not await records.delete_room(store, room_id):
        raise _not_found(room_id)
    return MessageEnvelope(message="Room deleted successfully")
