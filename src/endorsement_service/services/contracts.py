"""
endorsement_service.services.contracts

Capabilities the endorsement service depends on.

Responsibilities:
- `EndorsementStore`: key lookup, the five listing shapes, save and delete.
- `AccessControl`: may a caller act on behalf of an organization.

`db.repositories.endorsements.EndorsementRepo` and
`auth.access.OrgMembershipAccessControl` satisfy these structurally.
"""

from __future__ import annotations

from typing import Protocol

from endorsement_service.auth.models import Principal
from endorsement_service.db.models import Endorsement
from endorsement_service.services.paging import Page, PageRequest


class EndorsementStore(Protocol):
    async def find_by_org_and_service(
        self, org_mrn: str, service_mrn: str
    ) -> Endorsement | None: ...

    async def list_by_service(self, service_mrn: str, page: PageRequest) -> Page[Endorsement]: ...

    async def list_all_by_service(self, service_mrn: str) -> list[Endorsement]: ...

    async def list_by_org_and_level(
        self, org_mrn: str, service_level: str, page: PageRequest
    ) -> Page[Endorsement]: ...

    async def list_by_parent(self, parent_mrn: str, page: PageRequest) -> Page[Endorsement]: ...

    async def list_by_parent_and_org(
        self, parent_mrn: str, org_mrn: str, page: PageRequest
    ) -> Page[Endorsement]: ...

    async def save(self, endorsement: Endorsement) -> Endorsement:
        """Insert a new record or write back changes to an existing one."""
        ...

    async def delete(self, endorsement: Endorsement) -> None:
        """Remove an existing record; callers look it up first."""
        ...


class AccessControl(Protocol):
    def has_access_to_org(self, principal: Principal, org_mrn: str) -> bool:
        """Pure predicate; an unauthorized caller yields False, never an error."""
        ...
