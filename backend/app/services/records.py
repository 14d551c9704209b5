from __future__ import annotations
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
import structlog
from app.db import Store
from app.errors import DuplicateKey
from app.models.room import Room
from app.models.submission import Submission
from app.schemas.room import RoomWrite
from app.schemas.submission import SubmissionCreate
from app.services.transform import encode_amenities, encode_content

log = structlog.get_logger()


async def create_submission(store: Store, payload: SubmissionCreate) -> Submission:
    async with store.transaction() as session:
        sub = Submission(
            student_name=payload.student_name,
            work_type=payload.work_type,
            content=encode_content(payload.content),
        )
        session.add(sub)
        await session.flush()  # assigns id and created_at
    log.info("submission_saved", submission_id=sub.id, work_type=sub.work_type)
    return sub


async def list_submissions(store: Store) -> list[Submission]:
    """Newest first; id breaks ties between rows written in the same instant."""
    async with store.transaction() as session:
        return list((await session.execute(
            select(Submission).order_by(Submission.created_at.desc(), Submission.id.desc())
        )).scalars().all())


def _apply(room: Room, payload: RoomWrite) -> None:
    room.number = payload.number
    room.type = payload.type
    room.capacity = payload.capacity
    room.price = payload.price
    room.amenities = encode_amenities(payload.amenities)
    room.status = payload.status


async def create_room(store: Store, payload: RoomWrite) -> Room:
    """
    Insert a room. The UNIQUE constraint on number is the source of truth:
    a clash raises DuplicateKey and the transaction rolls back.
    """
    async with store.transaction() as session:
        room = Room()
        _apply(room, payload)
        session.add(room)
        try:
            await session.flush()
        except IntegrityError:
            log.info("room_duplicate", number=payload.number)
            raise DuplicateKey("number", payload.number)
    log.info("room_created", room_id=room.id, number=room.number)
    return room


async def list_rooms(store: Store) -> list[Room]:
    async with store.transaction() as session:
        return list((await session.execute(
            select(Room).order_by(Room.number.asc())
        )).scalars().all())


async def get_room(store: Store, room_id: int) -> Room | None:
    async with store.transaction() as session:
        return await session.get(Room, room_id)


async def count_rooms(store: Store) -> int:
    async with store.transaction() as session:
        total = await session.scalar(select(func.count()).select_from(Room))
        return int(total or 0)


async def update_room(store: Store, room_id: int, payload: RoomWrite) -> Room | None:
    """Full replace of every mutable field. Returns None when no row has this id."""
    async with store.transaction() as session:
        room = await session.get(Room, room_id)
        if room is None:
            log.info("room_not_found", room_id=room_id, op="update")
            return None
        _apply(room, payload)
        try:
            await session.flush()
        except IntegrityError:
            log.info("room_duplicate", number=payload.number, room_id=room_id)
            raise DuplicateKey("number", payload.number)
    log.info("room_updated", room_id=room_id)
    return room


async def delete_room(store: Store, room_id: int) -> bool:
    async with store.transaction() as session:
        room = await session.get(Room, room_id)
        if room is None:
            log.info("room_not_found", room_id=room_id, op="delete")
            return False
        await session.delete(room)
    log.info("room_deleted", room_id=room_id)
    return True
