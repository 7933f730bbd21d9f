"""
tests.test_auth

JWT helpers and organization access control.
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from helpers import ORG_A, ORG_B, principal_for

from endorsement_service.auth.access import OrgMembershipAccessControl
from endorsement_service.auth.jwt import (
    JwtConfig,
    JwtValidationError,
    decode_and_validate,
    issue_token,
)

SECRET = "endorsement-test-secret-0123456789"
CFG = JwtConfig(alg="HS256", issuer="iss", audience="aud", secret=SECRET)


def test_token_round_trip_carries_org_claim() -> None:
    token = issue_token(cfg=CFG, subject="alice", org_mrn=ORG_A, roles=["member"])
    payload = decode_and_validate(cfg=CFG, token=token)

    assert payload["sub"] == "alice"
    assert payload["org"] == ORG_A
    assert payload["roles"] == ["member"]


def test_token_without_org_omits_claim() -> None:
    payload = decode_and_validate(cfg=CFG, token=issue_token(cfg=CFG, subject="svc"))
    assert "org" not in payload


@pytest.mark.parametrize(
    "token_cfg",
    [
        JwtConfig(alg="HS256", issuer="iss", audience="aud", secret=SECRET[::-1]),
        JwtConfig(alg="HS256", issuer="other", audience="aud", secret=SECRET),
        JwtConfig(alg="HS256", issuer="iss", audience="other", secret=SECRET),
    ],
)
def test_rejects_foreign_tokens(token_cfg: JwtConfig) -> None:
    token = issue_token(cfg=token_cfg, subject="alice")
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token=token)


def test_rejects_expired_token() -> None:
    token = issue_token(cfg=CFG, subject="alice", ttl=timedelta(seconds=-10))
    with pytest.raises(JwtValidationError):
        decode_and_validate(cfg=CFG, token=token)


def test_members_have_access_to_their_own_org_only() -> None:
    access = OrgMembershipAccessControl()

    assert access.has_access_to_org(principal_for(ORG_A), ORG_A)
    assert access.has_access_to_org(principal_for(ORG_A), ORG_A.upper())
    assert not access.has_access_to_org(principal_for(ORG_A), ORG_B)
    assert not access.has_access_to_org(principal_for(None), ORG_A)
    assert not access.has_access_to_org(principal_for(ORG_A), "")


def test_site_admin_role_is_configurable() -> None:
    access = OrgMembershipAccessControl(site_admin_role="ROLE_SITE_ADMIN")

    assert access.has_access_to_org(principal_for(ORG_B, "ROLE_SITE_ADMIN"), ORG_A)
    assert not access.has_access_to_org(principal_for(ORG_B, "site_admin"), ORG_A)
