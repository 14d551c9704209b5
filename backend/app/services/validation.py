from __future__ import annotations
import json
from typing import Any
from pydantic import ValidationError
from app.errors import InvalidBody, InvalidEnum, InvalidField, MissingField
from app.schemas.submission import SubmissionCreate
from app.schemas.room import RoomWrite

WORK_TYPES: tuple[str, ...] = ("room_request", "report", "financial_report")
# Conventional values only; the store does not enforce them.
ROOM_STATUSES: tuple[str, ...] = ("available", "occupied", "maintenance")

SUBMISSION_REQUIRED = ("studentName", "workType", "content")
ROOM_REQUIRED = ("number", "type", "capacity", "price")


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise InvalidBody("Request body must be a JSON object")
    return payload


def missing_fields(payload: dict[str, Any], required: tuple[str, ...]) -> list[str]:
    """Names in `required` whose value is absent or falsy (None, "", 0, False, empty container)."""
    return [name for name in required if not payload.get(name)]


def field_errors(exc: ValidationError) -> dict[str, str]:
    out: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "body"
        out.setdefault(loc, err.get("msg", "invalid value"))
    return out


def parse_content(raw: Any) -> dict[str, Any]:
    """Accept a JSON-encoded object or an already-decoded object; anything else is rejected."""
    value = raw
    if isinstance(raw, str):
        try:
            value = json.loads(raw)
        except (ValueError, RecursionError):
            raise InvalidField({"content": "must be a JSON-encoded object"})
    if not isinstance(value, dict):
        raise InvalidField({"content": "must be a JSON object"})
    return value


def validate_submission(payload: Any) -> SubmissionCreate:
    payload = _require_object(payload)
    missing = missing_fields(payload, SUBMISSION_REQUIRED)
    if missing:
        raise MissingField(missing, required=list(SUBMISSION_REQUIRED))

    work_type = payload["workType"]
    if work_type not in WORK_TYPES:
        raise InvalidEnum("workType", work_type, WORK_TYPES, label="work type")

    content = parse_content(payload["content"])
    try:
        return SubmissionCreate.model_validate({
            "studentName": payload["studentName"],
            "workType": work_type,
            "content": content,
        })
    except ValidationError as e:
        raise InvalidField(field_errors(e))


def validate_room(payload: Any) -> RoomWrite:
    payload = _require_object(payload)
    missing = missing_fields(payload, ROOM_REQUIRED)
    if missing:
        raise MissingField(missing, required=list(ROOM_REQUIRED))

    amenities = payload.get("amenities")
    data = {
        "number": payload["number"],
        "type": payload["type"],
        "capacity": payload["capacity"],
        "price": payload["price"],
        "amenities": [] if amenities is None else amenities,
        "status": payload.get("status") or "available",
    }
    try:
        return RoomWrite.model_validate(data)
    except ValidationError as e:
        raise InvalidField(field_errors(e))
