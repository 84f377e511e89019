"""Pytest configuration and shared fixtures.

Settings are read at import time, so the environment is prepared before any
``app`` module is imported. Every test gets its own in-memory SQLite database.
"""
import os

os.environ.setdefault("JWT_SECRET", "test-signing-secret-with-at-least-32-characters")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["REQUEST_LOGGING_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.core.database import create_all_tables, create_engine, get_session_maker, set_engine


SIGNUP_PAYLOAD = {
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "password": "analytical-engine",
    "securityQuestion": "Name of your first pet?",
    "securityAnswer": "Babbage",
}


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database installed as the app's engine."""
    test_engine = create_engine("sqlite+aiosqlite:///:memory:")
    set_engine(test_engine)
    await create_all_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    async with get_session_maker(engine)() as session:
        yield session


@pytest_asyncio.fixture
async def client(engine):
    """Yield an AsyncClient bound directly to the FastAPI ASGI app."""
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def auth_headers(client):
    """Sign up the default user and return a bearer header for it."""
    resp = await client.post("/api/auth/signup", json=SIGNUP_PAYLOAD)
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}
