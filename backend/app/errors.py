from __future__ import annotations
from typing import Any


class ApiError(Exception):
    """Base for every failure that is reported to the client as an envelope."""
    status_code: int = 500
    code: str = "Unexpected"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_envelope(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": False, "error": self.message, "code": self.code}
        if self.details:
            body["details"] = self.details
        return body


class MissingField(ApiError):
    status_code = 400
    code = "MissingField"

    def __init__(self, fields: list[str], required: list[str] | None = None):
        self.fields = list(fields)
        names = ", ".join(required or fields)
        super().__init__(f"Missing required fields: {names}", {"missing": self.fields})


class InvalidEnum(ApiError):
    status_code = 400
    code = "InvalidEnum"

    def __init__(self, field: str, value: Any, allowed: tuple[str, ...] | list[str], label: str | None = None):
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        label = label or field
        super().__init__(
            f"Invalid {label}: {value}. Valid types: {', '.join(self.allowed)}",
            {"field": field, "value": value, "allowed": self.allowed},
        )


class InvalidField(ApiError):
    status_code = 400
    code = "InvalidField"

    def __init__(self, fields: dict[str, str]):
        self.fields = dict(fields)
        summary = "; ".join(f"{k}: {v}" for k, v in self.fields.items())
        super().__init__(f"Invalid fields: {summary}", {"fields": self.fields})


class InvalidBody(ApiError):
    status_code = 400
    code = "InvalidBody"


class DuplicateKey(ApiError):
    status_code = 409
    code = "DuplicateKey"

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(
            f"Database error: {field} '{value}' already exists",
            {"field": field, "value": value},
        )


class NotFound(ApiError):
    status_code = 404
    code = "NotFound"


class CorruptRecord(ApiError):
    status_code = 500
    code = "CorruptRecord"

    def __init__(self, table: str, record_id: Any, column: str):
        self.table = table
        self.record_id = record_id
        self.column = column
        super().__init__(
            f"Stored {table} record {record_id} has an unreadable {column} field",
            {"table": table, "id": record_id, "column": column},
        )
