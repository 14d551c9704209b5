from __future__ import annotations
from typing import Any
from fastapi import APIRouter, Body, Depends
import structlog
from app.db import Store, get_store
from app.errors import ApiError
from app.schemas.common import Envelope, ListEnvelope
from app.schemas.submission import SubmissionPublic
from app.services.records import create_submission, list_submissions
from app.services.transform import submission_to_public
from app.services.validation import validate_submission

router = APIRouter(prefix="/api/submissions", tags=["submissions"])
log = structlog.get_logger()

@router.get("", response_model=ListEnvelope[SubmissionPublic])
async def list_all(store: Store = Depends(get_store)):
    rows = await list_submissions(store)
    data = [submission_to_public(r) for r in rows]
    log.info("submissions_listed", count=len(data))
    return ListEnvelope[SubmissionPublic](count=len(data), data=data)

@router.post("", response_model=Envelope[SubmissionPublic], status_code=201)
async def create(payload: Any = Body(None), store: Store = Depends(get_store)):
    try:
        sub_in = validate_submission(payload)
    except ApiError as e:
        log.info("submission_rejected", code=e.code, details=e.details)
        raise
    sub = await create_submission(store, sub_in)
    return Envelope[SubmissionPublic](
        data=submission_to_public(sub),
        message="Submission saved successfully",
    )
