from __future__ import annotations
import json
import pytest
from app.errors import InvalidBody, InvalidEnum, InvalidField, MissingField
from app.services.validation import WORK_TYPES, missing_fields, parse_content, validate_room, validate_submission


def test_missing_fields_uses_falsiness():
    payload = {"a": 0, "b": "", "c": None, "d": False, "e": [], "f": "ok", "g": 1}
    assert missing_fields(payload, ("a", "b", "c", "d", "e", "f", "g", "h")) == ["a", "b", "c", "d", "e", "h"]


def test_validate_submission_parses_content_once():
    sub = validate_submission({
        "studentName": "Jane",
        "workType": "report",
        "content": json.dumps({"title": "T", "data": {"x": 1}}),
    })
    assert sub.student_name == "Jane"
    assert sub.work_type == "report"
    assert sub.content == {"title": "T", "data": {"x": 1}}


def test_validate_submission_missing_all():
    with pytest.raises(MissingField) as ei:
        validate_submission({})
    assert ei.value.fields == ["studentName", "workType", "content"]
    assert ei.value.status_code == 400


@pytest.mark.parametrize("work_type", ["bogus", "Report", "room-request"])
def test_validate_submission_rejects_unknown_work_type(work_type):
    with pytest.raises(InvalidEnum) as ei:
        validate_submission({"studentName": "J", "workType": work_type, "content": "{}"})
    assert ei.value.allowed == list(WORK_TYPES)
    assert "Valid types: room_request, report, financial_report" in ei.value.message


def test_validate_submission_requires_text_name():
    with pytest.raises(InvalidField) as ei:
        validate_submission({"studentName": {"first": "J"}, "workType": "report", "content": "{}"})
    assert "studentName" in ei.value.fields


@pytest.mark.parametrize("payload", [None, [], "text", 3])
def test_validate_rejects_non_object_bodies(payload):
    with pytest.raises(InvalidBody):
        validate_submission(payload)
    with pytest.raises(InvalidBody):
        validate_room(payload)


def test_validate_room_normalizes_optional_fields():
    room = validate_room({"number": "7", "type": "Suite", "capacity": 2, "price": 10})
    assert room.amenities == []
    assert room.status == "available"
    room = validate_room({"number": "7", "type": "Suite", "capacity": 2, "price": 10, "amenities": None, "status": ""})
    assert room.amenities == []
    assert room.status == "available"


def test_validate_room_coerces_numeric_number_to_text():
    assert validate_room({"number": 12, "type": "Suite", "capacity": 2, "price": 10}).number == "12"


def test_validate_room_zero_price_counts_as_missing():
    with pytest.raises(MissingField) as ei:
        validate_room({"number": "1", "type": "Suite", "capacity": 1, "price": 0})
    assert ei.value.fields == ["price"]


def test_validate_room_keeps_loose_status_and_amenities():
    room = validate_room({
        "number": "9", "type": "Suite", "capacity": 1, "price": 5,
        "amenities": "WiFi", "status": "closed_for_party",
    })
    assert room.amenities == "WiFi"
    assert room.status == "closed_for_party"


def test_validate_room_type_errors():
    with pytest.raises(InvalidField) as ei:
        validate_room({"number": "9", "type": "Suite", "capacity": 1.5, "price": -1})
    assert set(ei.value.fields) == {"capacity", "price"}


def test_parse_content_rejects_runaway_nesting():
    with pytest.raises(InvalidField) as ei:
        parse_content('{"a": ' + "[" * 100000 + "]" * 100000 + "}")
    assert "content" in ei.value.fields


def test_parse_content_accepts_any_subfield_types():
    assert parse_content('{"title": 5, "data": [1]}') == {"title": 5, "data": [1]}
