"""Shared test fixtures for the ShopWave API test suite."""

import os
import tempfile
from decimal import Decimal

# Settings are read once at import time, so the environment goes first
_DB_DIR = tempfile.mkdtemp(prefix="shopwave-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/test.db"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["CHECKOUT_PROCESSING_DELAY"] = "0"

import pytest
from httpx import ASGITransport, AsyncClient

from shopwave.core.database import AsyncSessionLocal, engine
from shopwave.core.security import SecurityUtils
from shopwave.main import app
from shopwave.models import Base, Product


@pytest.fixture(autouse=True)
async def setup_database():
    """Recreate every table for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield


@pytest.fixture
async def db_session():
    """Session for calling services directly."""
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client():
    """HTTP client bound to the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
def make_token():
    """Issue a session token the way the identity provider would."""
    def _make(user_id="user-1", **claims):
        return SecurityUtils.create_access_token({"sub": user_id, **claims})
    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(user_id="user-1"):
        return {"Authorization": f"Bearer {make_token(user_id)}"}
    return _headers


@pytest.fixture
def make_product():
    """Insert a product in its own session and return it."""
    async def _make(**overrides):
        data = {
            "name": "Test Product",
            "description": "A product used in tests",
            "price": Decimal("10.00"),
            "category": "General",
            "stock": 5,
            "image_url": None,
        }
        data.update(overrides)
        async with AsyncSessionLocal() as session:
            product = Product(**data)
            session.add(product)
            await session.commit()
            await session.refresh(product)
            return product
    return _make
