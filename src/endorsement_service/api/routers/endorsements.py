"""
endorsement_service.api.routers.endorsements

Endorsement endpoints (mounted under `/oidc`).

Responsibilities:
- Create-or-update and delete endorsements on behalf of the caller's organization.
- Open read APIs: key lookup, listings by service, batch of services, service level
  + org, parent, parent + org.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
)

from endorsement_service.api.deps import db_session, endorsement_service, page_request
from endorsement_service.api.schemas import (
    EndorsementIn,
    EndorsementListOut,
    EndorsementOut,
    EndorsementPage,
)
from endorsement_service.auth.deps import get_principal
from endorsement_service.auth.models import Principal
from endorsement_service.services.endorsement_service import EndorsementService
from endorsement_service.services.errors import (
    AccessDenied,
    EndorsementNotFound,
    InvalidEndorsement,
)
from endorsement_service.services.paging import PageRequest

router = APIRouter(prefix="/oidc", tags=["endorsements"])


@router.post("/endorsements", response_model=EndorsementOut)
async def create_endorsement(
    body: EndorsementIn,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementOut:
    try:
        endorsement = await svc.create_or_update(principal, body.to_model())
    except InvalidEndorsement as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except AccessDenied as e:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail=str(e)) from e
    await session.commit()
    return EndorsementOut.model_validate(endorsement)


@router.get("/endorsements/{service_mrn}", response_model=EndorsementPage)
async def list_endorsements_by_service(
    service_mrn: str,
    page: PageRequest = Depends(page_request),
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementPage:
    return EndorsementPage.from_page(await svc.list_by_service(service_mrn, page))


@router.post("/endorsement-list", response_model=list[EndorsementListOut])
async def list_endorsements_by_services(
    service_mrns: list[str] | None = Body(default=None),
    svc: EndorsementService = Depends(endorsement_service),
) -> list[EndorsementListOut]:
    return [EndorsementListOut.from_list(item) for item in await svc.list_by_services(service_mrns)]


@router.get("/endorsements-by/{service_level}/{org_mrn}", response_model=EndorsementPage)
async def list_endorsements_by_org_and_level(
    service_level: str,
    org_mrn: str,
    page: PageRequest = Depends(page_request),
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementPage:
    return EndorsementPage.from_page(await svc.list_by_org_and_level(org_mrn, service_level, page))


@router.delete("/endorsements/{service_mrn}/{org_mrn}")
async def delete_endorsement(
    service_mrn: str,
    org_mrn: str,
    principal: Principal = Depends(get_principal),
    session: AsyncSession = Depends(db_session),
    svc: EndorsementService = Depends(endorsement_service),
) -> dict[str, str]:
    try:
        await svc.delete(principal, org_mrn, service_mrn)
    except EndorsementNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Endorsement not found") from e
    except AccessDenied as e:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail=str(e)) from e
    await session.commit()
    return {"status": "deleted"}


@router.get("/endorsement-by/{service_mrn}/{org_mrn}", response_model=EndorsementOut)
async def get_endorsement(
    service_mrn: str,
    org_mrn: str,
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementOut:
    try:
        endorsement = await svc.get_by_key(org_mrn, service_mrn)
    except EndorsementNotFound as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Endorsement not found") from e
    return EndorsementOut.model_validate(endorsement)


@router.get("/endorsed-children/{parent_mrn}", response_model=EndorsementPage)
async def list_endorsed_children(
    parent_mrn: str,
    page: PageRequest = Depends(page_request),
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementPage:
    return EndorsementPage.from_page(await svc.list_by_parent(parent_mrn, page))


@router.get("/endorsed-children/{parent_mrn}/{org_mrn}", response_model=EndorsementPage)
async def list_endorsed_children_by_org(
    parent_mrn: str,
    org_mrn: str,
    page: PageRequest = Depends(page_request),
    svc: EndorsementService = Depends(endorsement_service),
) -> EndorsementPage:
    return EndorsementPage.from_page(await svc.list_by_parent_and_org(parent_mrn, org_mrn, page))


# --- Module Notes -----------------------------------------------------------
# Reads are open and take no token; only create and delete depend on `get_principal`.
