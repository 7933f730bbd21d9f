"""
endorsement_service.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Principal`) injected into endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller identity.

    `org_mrn` is the organization the identity provider vouches the caller belongs to.
    """

    subject: str
    org_mrn: str | None
    roles: frozenset[str]

    def has_role(self, role: str) -> bool:
        return role in self.roles
