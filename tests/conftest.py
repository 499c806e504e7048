import pytest
from httpx import ASGITransport, AsyncClient

from bookcatalog.app import create_app
from bookcatalog.store import BookStore

TEST_DB_URL = "sqlite+aiosqlite://"  # in-memory


@pytest.fixture
async def store():
    s = BookStore(TEST_DB_URL)
    await s.initialize()
    yield s
    await s.dispose()


@pytest.fixture
async def client(store):
    app = create_app(store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def broken_client():
    """Client for an app whose store was never initialized, so every query fails."""
    s = BookStore(TEST_DB_URL)
    app = create_app(s)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    await s.dispose()
