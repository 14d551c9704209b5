from __future__ import annotations
import time
from fastapi import APIRouter, Request
from datetime import datetime, timezone
from app.config import settings

router = APIRouter(tags=["system"])

_PROCESS_STARTED = time.monotonic()

@router.get("/")
async def index():
    return {
        "success": True,
        "message": f"{settings.app_display_name} API",
        "status": "Running",
        "version": settings.app_version,
        "endpoints": {
            "health": "/health",
            "version": "/version",
            "submissions": "/api/submissions",
            "rooms": "/api/rooms",
        },
    }

@router.get("/health")
async def health(request: Request):
    started = getattr(request.app.state, "started_at", _PROCESS_STARTED)
    return {
        "success": True,
        "status": "OK",
        "env": settings.environment,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - started, 3),
        "request_id": request.headers.get("x-request-id") or request.state.request_id,
    }

@router.get("/version")
async def version():
    return {
        "success": True,
        "name": settings.app_name,
        "version": settings.app_version,
        "git_sha": settings.git_sha,
    }
