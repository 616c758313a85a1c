import asyncio
import os
import sys
import tempfile
from pathlib import Path
from typing import AsyncGenerator

# Must be set before app.core.config builds its Settings
_TEST_DB = Path(tempfile.gettempdir()) / "test_crudy_restaurants.db"
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB}")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.db.session import AsyncSessionLocal, engine
from app.main import app

if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())


@pytest_asyncio.fixture(scope="function", autouse=True)
async def recreate_tables_between_tests() -> AsyncGenerator[None, None]:
    """Ensure test isolation by rebuilding the schema from the ORM metadata."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def sample_restaurant_data() -> dict:
    return {
        "name": "Apple",
        "address": "123 Main Street",
        "city": "City",
        "state": "ST",
        "telephone": "555-555-1234",
        "seat_capacity": 3,
        "menus": [
            {"dish": "Mac and Cheese", "price": 6.95},
            {"dish": "Lasagna", "price": 8.50},
        ],
    }


@pytest_asyncio.fixture
async def payment_ids(client: AsyncClient) -> dict[str, int]:
    ids = {}
    for payment_type in ("Cash", "Credit Card", "Mobile Pay"):
        response = await client.post("/v1/payments", json={"type": payment_type})
        ids[payment_type] = response.json()["id"]
    return ids
