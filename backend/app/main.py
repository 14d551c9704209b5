from __future__ import annotations
import time
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import Settings, settings as default_settings
from app.db import Store
from app.errors import ApiError, InvalidBody
from app.logging_setup import configure_logging
from app.routes.system import router as system_router
from app.routes.submissions import router as submissions_router
from app.routes.rooms import router as rooms_router
import structlog

configure_logging()
log = structlog.get_logger()


def _validation_summary(exc: RequestValidationError) -> dict[str, str]:
    out: dict[str, str] = {}
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body") or "body"
        out.setdefault(loc, str(err.get("msg", "invalid value")))
    return out


def install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error(request: Request, exc: ApiError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        err = InvalidBody("Invalid request", {"fields": _validation_summary(exc)})
        return JSONResponse(status_code=err.status_code, content=err.to_envelope())

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        message = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": message},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        # runs outside add_request_id, which has already cleared the context
        rid = getattr(request.state, "request_id", None)
        headers = None
        if rid:
            structlog.contextvars.bind_contextvars(request_id=rid)
            headers = {"X-Request-ID": rid}
        try:
            log.exception("unhandled_error", path=request.url.path)
        finally:
            structlog.contextvars.clear_contextvars()
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
            headers=headers,
        )


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Build the API. The record store is created and seeded by the lifespan and torn down with it."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        log.info("startup", env=settings.environment, version=settings.app_version, git_sha=settings.git_sha)
        store = Store(settings.database_url)
        await store.open(seed=settings.seed_sample_rooms)
        app.state.store = store
        app.state.started_at = time.monotonic()
        yield
        # Shutdown
        await store.close()
        log.info("shutdown")

    app = FastAPI(
        title=f"{settings.app_display_name} API",
        version=settings.app_version,
        lifespan=lifespan,
        description=f"{settings.app_display_name} API for work submissions and the room catalog",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.environment == "dev" else settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(system_router)
    app.include_router(submissions_router)
    app.include_router(rooms_router)
    install_error_handlers(app)

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        rid = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = rid
        structlog.contextvars.bind_contextvars(request_id=rid)
        try:
            response: Response = await call_next(request)
        finally:
            structlog.contextvars.clear_contextvars()
        response.headers["X-Request-ID"] = rid
        return response

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=default_settings.api_host, port=default_settings.api_port)
