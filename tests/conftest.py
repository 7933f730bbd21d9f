"""
tests.conftest

Shared fixtures: test settings on a per-test SQLite file, DB sessions, the ASGI
client, token minting and an in-memory recording store.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from helpers import RecordingStore
from sqlalchemy.ext.asyncio import AsyncSession

from endorsement_service.api.app import create_app
from endorsement_service.auth.deps import jwt_config
from endorsement_service.auth.jwt import issue_token
from endorsement_service.db.init_db import init_db
from endorsement_service.db.session import create_engine, create_sessionmaker
from endorsement_service.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'endorsements.db'}",
    )


@pytest_asyncio.fixture
async def session(settings: Settings) -> AsyncIterator[AsyncSession]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        async with create_sessionmaker(engine)() as s:
            yield s
    finally:
        await engine.dispose()


@pytest.fixture
def app(settings: Settings):
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    # ASGITransport does not run the lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest.fixture
def auth_header(settings: Settings):
    def _make(org_mrn: str | None, *roles: str) -> dict[str, str]:
        token = issue_token(
            cfg=jwt_config(settings),
            subject=f"user-of-{org_mrn}",
            org_mrn=org_mrn,
            roles=list(roles),
        )
        return {"Authorization": f"Bearer {token}"}

    return _make


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()
