import os

# Settings are read at import time and the Gemini key has no default
os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import json

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

import assetkeeper.models  # noqa: F401
from assetkeeper.core.database import get_db
from assetkeeper.models.base import Base
from assetkeeper.schemas.asset import AssetCreate
from assetkeeper.schemas.user import UserCreate
from assetkeeper.services.gemini import GeminiClient, get_gemini_client


def gemini_reply(text):
    """Body of a successful generateContent call"""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeGemini:
    """Records prompts and answers every request with the configured response"""

    def __init__(self):
        self.prompts = []
        self.status_code = 200
        self.body = gemini_reply("{}")

    def reply(self, text):
        self.status_code = 200
        self.body = gemini_reply(text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.prompts.append(json.loads(request.content)["contents"][0]["parts"][0]["text"])
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> GeminiClient:
        return GeminiClient(
            api_key="test-key",
            model="gemini-test",
            base_url="https://gemini.test/v1beta",
            timeout=5,
            transport=httpx.MockTransport(self.handler),
        )


@pytest_asyncio.fixture
async def session_maker():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest_asyncio.fixture
async def client(session_maker, gemini):
    from assetkeeper import create_app

    app = create_app()

    async def _get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_gemini_client] = gemini.client

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def monitor_data():
    return AssetCreate(
        name="Monitor Dell 24",
        category="monitor",
        condition="new",
        owner="John Doe",
    )


@pytest_asyncio.fixture
async def asset(db, monitor_data):
    from assetkeeper.crud.assets import create_asset
    return await create_asset(db, monitor_data)


@pytest_asyncio.fixture
async def staff(db):
    from assetkeeper.crud.users import create_user
    return await create_user(
        db,
        UserCreate(email="staff@company.com", password="secret123", name="Staff Member"),
    )
