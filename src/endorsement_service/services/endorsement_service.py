"""
endorsement_service.services.endorsement_service

Endorsement lifecycle service.

Responsibilities:
- Create-or-update endorsements keyed by (org MRN, service MRN).
- Key lookup and the listing shapes (by service, batch of services, org + level,
  parent, parent + org).
- Delete with existence check before authorization.
- Enforce organization access before any store mutation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from endorsement_service.auth.models import Principal
from endorsement_service.db.models import Endorsement
from endorsement_service.observability.logging import get_logger
from endorsement_service.services.contracts import AccessControl, EndorsementStore
from endorsement_service.services.errors import (
    AccessDenied,
    EndorsementNotFound,
    InvalidEndorsement,
)
from endorsement_service.services.paging import Page, PageRequest

log = get_logger(__name__)


@dataclass(slots=True)
class EndorsementList:
    service_mrn: str
    endorsements: list[Endorsement] = field(default_factory=list)


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


class EndorsementService:
    def __init__(self, *, store: EndorsementStore, access: AccessControl) -> None:
        self._store = store
        self._access = access

    def _require_access(self, principal: Principal, org_mrn: str) -> None:
        if not self._access.has_access_to_org(principal, org_mrn):
            log.warning(
                "endorsement_access_denied",
                subject=principal.subject,
                caller_org=principal.org_mrn,
                org_mrn=org_mrn,
            )
            raise AccessDenied(org_mrn)

    async def create_or_update(self, principal: Principal, endorsement: Endorsement) -> Endorsement:
        """
        Upsert keyed by (org_mrn, service_mrn).

        An existing record only has its `user_mrn` reassigned; its parent and service
        level are kept. Concurrent calls on one key are last-writer-wins.
        """

        if _blank(endorsement.org_mrn) or _blank(endorsement.service_mrn):
            raise InvalidEndorsement("orgMrn and serviceMrn are required")
        self._require_access(principal, endorsement.org_mrn)

        existing = await self._store.find_by_org_and_service(
            endorsement.org_mrn, endorsement.service_mrn
        )
        if existing is not None:
            existing.user_mrn = endorsement.user_mrn
            saved = await self._store.save(existing)
            created = False
        else:
            saved = await self._store.save(endorsement)
            created = True

        log.info(
            "endorsement_saved",
            org_mrn=saved.org_mrn,
            service_mrn=saved.service_mrn,
            user_mrn=saved.user_mrn,
            created=created,
            actor=principal.subject,
        )
        return saved

    async def get_by_key(self, org_mrn: str, service_mrn: str) -> Endorsement:
        endorsement = await self._store.find_by_org_and_service(org_mrn, service_mrn)
        if endorsement is None:
            raise EndorsementNotFound(org_mrn, service_mrn)
        return endorsement

    async def list_by_service(self, service_mrn: str, page: PageRequest) -> Page[Endorsement]:
        return await self._store.list_by_service(service_mrn, page)

    async def list_by_services(self, service_mrns: Sequence[str] | None) -> list[EndorsementList]:
        # One entry per input element: order and duplicates are preserved.
        if not service_mrns:
            return []
        return [
            EndorsementList(
                service_mrn=service_mrn,
                endorsements=await self._store.list_all_by_service(service_mrn),
            )
            for service_mrn in service_mrns
        ]

    async def list_by_org_and_level(
        self, org_mrn: str, service_level: str, page: PageRequest
    ) -> Page[Endorsement]:
        return await self._store.list_by_org_and_level(org_mrn, service_level, page)

    async def list_by_parent(self, parent_mrn: str, page: PageRequest) -> Page[Endorsement]:
        return await self._store.list_by_parent(parent_mrn, page)

    async def list_by_parent_and_org(
        self, parent_mrn: str, org_mrn: str, page: PageRequest
    ) -> Page[Endorsement]:
        return await self._store.list_by_parent_and_org(parent_mrn, org_mrn, page)

    async def delete(self, principal: Principal, org_mrn: str, service_mrn: str) -> None:
        # Existence is checked before authorization: a caller without access still
        # learns whether the key exists (404 vs 403).
        endorsement = await self.get_by_key(org_mrn, service_mrn)
        self._require_access(principal, org_mrn)
        await self._store.delete(endorsement)
        log.info(
            "endorsement_deleted",
            org_mrn=org_mrn,
            service_mrn=service_mrn,
            actor=principal.subject,
        )


# --- Module Notes -----------------------------------------------------------
# Transaction boundaries belong to the caller (the API routers commit after a
# successful mutation); the service only flushes through the store.
