"""
endorsement_service.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`): the endorsements table must be queryable,
  which also catches a database that was never migrated.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_503_SERVICE_UNAVAILABLE

from endorsement_service.api.deps import db_session
from endorsement_service.db.models import Endorsement
from endorsement_service.observability.logging import get_logger

router = APIRouter()

log = get_logger(__name__)


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    try:
        await session.execute(select(Endorsement.id).limit(1))
    except SQLAlchemyError as e:
        log.warning("readiness_failed", error=str(e))
        raise HTTPException(
            status_code=HTTP_503_SERVICE_UNAVAILABLE, detail="Endorsement store unavailable"
        ) from e
    return {"status": "ready"}
