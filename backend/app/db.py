from __future__ import annotations
import asyncio
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator
from fastapi import Request
from sqlalchemy import DateTime
from sqlalchemy.types import TypeDecorator
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
import structlog

log = structlog.get_logger()

class Base(DeclarativeBase):
    pass


class UTCDateTime(TypeDecorator):
    """DateTime that always comes back timezone-aware (SQLite drops tzinfo)."""
    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Store:
    """
    Process-local record store for submissions and rooms.

    One Store owns one engine. With the default in-memory SQLite URL the data
    lives exactly as long as the Store does; nothing survives close().
    All work goes through transaction(), which serializes callers on an
    asyncio.Lock so no two mutations interleave.
    """

    def __init__(self, database_url: str):
        self.database_url = database_url
        kwargs: dict = {"future": True, "echo": False}
        if database_url.startswith("sqlite"):
            # one shared connection, otherwise each checkout sees a new empty :memory: db
            kwargs["poolclass"] = StaticPool
            kwargs["connect_args"] = {"check_same_thread": False}
        self.engine: AsyncEngine = create_async_engine(database_url, **kwargs)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False)
        self._lock = asyncio.Lock()
        self.is_open = False

    async def open(self, *, seed: bool = True) -> "Store":
        # models must be registered on Base.metadata before create_all
        import app.models.submission  # noqa: F401
        import app.models.room  # noqa: F401
        from app.services.seed import seed_rooms

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self.is_open = True
        log.info("store_opened", url=self.database_url.split("@")[-1])
        if seed:
            await seed_rooms(self)
        return self

    async def close(self) -> None:
        await self.engine.dispose()
        self.is_open = False

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        async with self._lock:
            async with self.sessionmaker() as session:
                async with session.begin():
                    yield session


def get_store(request: Request) -> Store:
    return request.app.state.store
