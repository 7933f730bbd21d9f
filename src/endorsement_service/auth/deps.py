"""
endorsement_service.auth.deps

FastAPI dependency functions for authentication.

Responsibilities:
- Convert a bearer token into a typed `Principal`.
- Provide the configured `AccessControl` implementation.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.status import HTTP_401_UNAUTHORIZED

from endorsement_service.auth.access import OrgMembershipAccessControl
from endorsement_service.auth.jwt import JwtConfig, JwtValidationError, decode_and_validate
from endorsement_service.auth.models import Principal
from endorsement_service.settings import Settings, get_settings

_bearer = HTTPBearer(auto_error=False)


def jwt_config(settings: Settings) -> JwtConfig:
    return JwtConfig(
        alg=settings.jwt_alg,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
        org_claim=settings.org_claim,
    )


def get_principal(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    settings: Settings = Depends(get_settings),
) -> Principal:
    if creds is None or not creds.credentials:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Missing bearer token")

    try:
        payload = decode_and_validate(cfg=jwt_config(settings), token=creds.credentials)
    except JwtValidationError as e:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=f"Invalid token: {e}") from e

    subject = str(payload.get("sub", ""))
    roles_raw = payload.get("roles", [])
    org_raw = payload.get(settings.org_claim)
    if not subject:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token subject")
    if not isinstance(roles_raw, list):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token roles")
    if org_raw is not None and not isinstance(org_raw, str):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Invalid token organization")

    return Principal(
        subject=subject,
        org_mrn=org_raw or None,
        roles=frozenset(str(r) for r in roles_raw),
    )


def get_access_control(settings: Settings = Depends(get_settings)) -> OrgMembershipAccessControl:
    return OrgMembershipAccessControl(site_admin_role=settings.site_admin_role)


# --- Module Notes -----------------------------------------------------------
# Read-only endpoints do not depend on `get_principal`; only writes require a token.
