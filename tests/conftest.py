from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from feedback_api.config import Settings
from feedback_api.database import Database
from feedback_api.main import create_app


@pytest.fixture()
def test_db_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture()
def app(test_db_url: str):
    return create_app(Settings(database_url=test_db_url, debug=True, create_all=True))


@pytest_asyncio.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest_asyncio.fixture()
async def client_without_tables(test_db_url: str) -> AsyncIterator[AsyncClient]:
    """Client whose database has no schema, so every query fails."""
    app = create_app(Settings(database_url=test_db_url, debug=True, create_all=False))
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac


@pytest_asyncio.fixture()
async def database(test_db_url: str) -> AsyncIterator[Database]:
    db = Database(test_db_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture()
def valid_payload() -> dict:
    return {
        "name": "Ada",
        "lastName": "Lovelace",
        "email": "Ada.Lovelace@Analytical.ENGINE.io",
        "department": "Engineering",
        "category": "suggestion",
        "message": "The course could use more exercises on embeddings.",
    }
