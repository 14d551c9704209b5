from __future__ import annotations
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from app.db import Store
from app.main import create_app

MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def client():
    # fresh app -> fresh lifespan -> fresh seeded in-memory store
    with TestClient(create_app()) as c:
        yield c


@pytest_asyncio.fixture
async def store():
    s = Store(MEMORY_URL)
    await s.open(seed=False)
    yield s
    await s.close()


@pytest_asyncio.fixture
async def seeded_store():
    s = Store(MEMORY_URL)
    await s.open(seed=True)
    yield s
    await s.close()
