"""
endorsement_service.api.app

FastAPI app factory for the endorsement service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Initialize and dispose shared infrastructure (DB engine/session factory).
- Map store failures to a 500 response.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from endorsement_service.api.routers.dev_auth import router as dev_auth_router
from endorsement_service.api.routers.endorsements import router as endorsements_router
from endorsement_service.api.routers.health import router as health_router
from endorsement_service.db.init_db import init_db
from endorsement_service.db.session import create_engine, create_sessionmaker
from endorsement_service.observability.logging import configure_logging, get_logger
from endorsement_service.observability.middleware import RequestContextMiddleware
from endorsement_service.services.errors import StoreFailure
from endorsement_service.settings import Settings, get_settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json=settings.log_json,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One engine per process; routers obtain sessions via `api.deps.db_session`.
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Endorsement Service",
        version="0.1.0",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Routers resolve settings through `get_settings`; make them see this instance.
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(dev_auth_router)
    app.include_router(endorsements_router)

    @app.exception_handler(StoreFailure)
    async def _store_failure(_: Request, exc: StoreFailure) -> JSONResponse:
        log.error("store_failure", error=str(exc), exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Endorsement store failure"},
        )

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business rules stay in `services`.
