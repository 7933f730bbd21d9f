"""
endorsement_service.auth.access

Organization access control.

Responsibilities:
- Decide whether a caller may act on behalf of an organization MRN.
"""

from __future__ import annotations

from endorsement_service.auth.models import Principal


class OrgMembershipAccessControl:
    """
    A caller may act for an organization when it is a member of that organization,
    or when it holds the site-admin role.
    """

    def __init__(self, *, site_admin_role: str = "site_admin") -> None:
        self._site_admin_role = site_admin_role

    def has_access_to_org(self, principal: Principal, org_mrn: str) -> bool:
        if not org_mrn or not org_mrn.strip():
            return False
        if principal.has_role(self._site_admin_role):
            return True
        if not principal.org_mrn:
            return False
        # MRNs are case-insensitive identifiers.
        return principal.org_mrn.strip().casefold() == org_mrn.strip().casefold()
