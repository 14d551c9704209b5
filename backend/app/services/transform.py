"""
Row <-> wire mapping for the two JSON-in-text columns.

Writes go through encode_* so the stored text is always canonical JSON;
reads go through decode_* and surface anything unreadable as CorruptRecord.
"""
from __future__ import annotations
import json
from typing import Any
import structlog
from app.errors import CorruptRecord
from app.models.room import Room
from app.models.submission import Submission
from app.schemas.room import RoomPublic
from app.schemas.submission import SubmissionPublic

log = structlog.get_logger()


def encode_amenities(amenities: Any) -> str:
    return json.dumps([] if amenities is None else amenities, ensure_ascii=False)


def decode_amenities(text: str | None) -> Any:
    if text is None or text == "":
        return []
    decoded = json.loads(text)
    return [] if decoded is None else decoded


def encode_content(content: dict[str, Any]) -> str:
    return json.dumps(content, ensure_ascii=False, sort_keys=True, separators=(",", ":"))


def decode_content(text: str) -> dict[str, Any]:
    decoded = json.loads(text)
    if not isinstance(decoded, dict):
        raise ValueError("content is not a JSON object")
    return decoded


def submission_to_public(row: Submission) -> SubmissionPublic:
    try:
        content = decode_content(row.content)
    except (TypeError, ValueError, RecursionError):
        log.error("corrupt_record", table="submissions", id=row.id, column="content")
        raise CorruptRecord("submission", row.id, "content")
    return SubmissionPublic(
        id=row.id,
        student_name=row.student_name,
        type=row.work_type,
        title=content.get("title") or "Untitled",
        description=content.get("description") or "",
        data=content.get("data") or {},
        submitted_at=row.created_at,
        student_id=content.get("studentId"),
        student_email=content.get("studentEmail"),
    )


def room_to_public(row: Room) -> RoomPublic:
    try:
        amenities = decode_amenities(row.amenities)
    except (TypeError, ValueError, RecursionError):
        log.error("corrupt_record", table="rooms", id=row.id, column="amenities")
        raise CorruptRecord("room", row.id, "amenities")
    return RoomPublic(
        id=row.id,
        number=row.number,
        type=row.type,
        capacity=row.capacity,
        price=row.price,
        amenities=amenities,
        status=row.status,
        created_at=row.created_at,
    )
