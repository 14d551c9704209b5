from __future__ import annotations
from typing import Any, Literal
from datetime import datetime
from pydantic import Field
from app.schemas.common import ApiModel

WorkType = Literal["room_request", "report", "financial_report"]


class SubmissionCreate(ApiModel):
    student_name: str = Field(min_length=1)
    work_type: WorkType
    # parsed once on the way in; stored as canonical JSON text
    content: dict[str, Any]


class SubmissionPublic(ApiModel):
    id: int
    student_name: str
    type: WorkType
    # content sub-fields are passed through unvalidated
    title: Any
    description: Any
    data: Any = Field(default_factory=dict)
    submitted_at: datetime
    student_id: Any | None = None
    student_email: Any | None = None
