"""
tests.helpers

Shared test data: MRN constants, principal construction and a dict-backed
recording store satisfying the endorsement store contract.
"""

from __future__ import annotations

from endorsement_service.auth.models import Principal
from endorsement_service.db.models import Endorsement
from endorsement_service.services.paging import Page, PageRequest

ORG_A = "urn:mrn:org:A"
ORG_B = "urn:mrn:org:B"
SERVICE_X = "urn:mrn:service:X"
SERVICE_Y = "urn:mrn:service:Y"


def principal_for(org_mrn: str | None, *roles: str) -> Principal:
    return Principal(subject=f"user-of-{org_mrn}", org_mrn=org_mrn, roles=frozenset(roles))


class RecordingStore:
    """Dict-backed store that records every call made to it."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.rows: dict[tuple[str, str], Endorsement] = {}

    async def find_by_org_and_service(self, org_mrn: str, service_mrn: str) -> Endorsement | None:
        self.calls.append("find_by_org_and_service")
        return self.rows.get((org_mrn, service_mrn))

    async def list_by_service(self, service_mrn: str, page: PageRequest) -> Page[Endorsement]:
        self.calls.append("list_by_service")
        return self._page([e for e in self.rows.values() if e.service_mrn == service_mrn], page)

    async def list_all_by_service(self, service_mrn: str) -> list[Endorsement]:
        self.calls.append("list_all_by_service")
        return [e for e in self.rows.values() if e.service_mrn == service_mrn]

    async def list_by_org_and_level(
        self, org_mrn: str, service_level: str, page: PageRequest
    ) -> Page[Endorsement]:
        self.calls.append("list_by_org_and_level")
        rows = [
            e
            for e in self.rows.values()
            if e.org_mrn == org_mrn and e.service_level == service_level
        ]
        return self._page(rows, page)

    async def list_by_parent(self, parent_mrn: str, page: PageRequest) -> Page[Endorsement]:
        self.calls.append("list_by_parent")
        return self._page([e for e in self.rows.values() if e.parent_mrn == parent_mrn], page)

    async def list_by_parent_and_org(
        self, parent_mrn: str, org_mrn: str, page: PageRequest
    ) -> Page[Endorsement]:
        self.calls.append("list_by_parent_and_org")
        rows = [
            e for e in self.rows.values() if e.parent_mrn == parent_mrn and e.org_mrn == org_mrn
        ]
        return self._page(rows, page)

    async def save(self, endorsement: Endorsement) -> Endorsement:
        self.calls.append("save")
        self.rows[(endorsement.org_mrn, endorsement.service_mrn)] = endorsement
        return endorsement

    async def delete(self, endorsement: Endorsement) -> None:
        self.calls.append("delete")
        del self.rows[(endorsement.org_mrn, endorsement.service_mrn)]

    @staticmethod
    def _page(rows: list[Endorsement], page: PageRequest) -> Page[Endorsement]:
        return Page(
            content=rows[page.offset : page.offset + page.size],
            page=page.page,
            size=page.size,
            total_elements=len(rows),
        )

