"""Integration fixtures — a throwaway SQLite database per test and an ASGI client."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from auto_ease.infrastructure.database import Base, build_session_factory
from auto_ease.infrastructure.dependencies import build_app_services
from auto_ease.main import create_app


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'auto_ease.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    # ASGITransport skips the lifespan, so wire the services by hand
    app = create_app()
    app.state.services = build_app_services(session_factory)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
