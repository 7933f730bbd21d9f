"""
endorsement_service.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for DB sessions and paging parameters.
- Assemble a request-scoped `EndorsementService`.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.status import HTTP_400_BAD_REQUEST

from endorsement_service.auth.access import OrgMembershipAccessControl
from endorsement_service.auth.deps import get_access_control
from endorsement_service.db.repositories.endorsements import EndorsementRepo
from endorsement_service.services.endorsement_service import EndorsementService
from endorsement_service.services.paging import PageRequest
from endorsement_service.settings import Settings, get_settings


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan (`endorsement_service.api.app.create_app`).
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped session; routers commit after successful mutations, anything
    # uncommitted is rolled back when the session closes.
    async with session_factory() as session:
        yield session


def page_request(
    page: int = Query(default=0, ge=0),
    size: int | None = Query(default=None),
    settings: Settings = Depends(get_settings),
) -> PageRequest:
    if size is None:
        size = settings.default_page_size
    try:
        return PageRequest(page=page, size=min(size, settings.max_page_size))
    except ValueError as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e


def endorsement_service(
    session: AsyncSession = Depends(db_session),
    access: OrgMembershipAccessControl = Depends(get_access_control),
) -> EndorsementService:
    return EndorsementService(store=EndorsementRepo(session), access=access)
