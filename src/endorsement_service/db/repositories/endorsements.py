"""
endorsement_service.db.repositories.endorsements

Repository for `Endorsement` entities.

Responsibilities:
- Exact-key lookup by (org MRN, service MRN).
- Paginated listings by service, org + service level, parent, parent + org.
- Insert-or-update and delete.
- Wrap SQLAlchemy failures in `StoreFailure`.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from endorsement_service.db.models import Endorsement, utcnow
from endorsement_service.services.errors import StoreFailure
from endorsement_service.services.paging import Page, PageRequest

# Stable ordering so repeated queries page identically.
_ORDERING = (Endorsement.created_at, Endorsement.id)


class EndorsementRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_org_and_service(self, org_mrn: str, service_mrn: str) -> Endorsement | None:
        stmt = select(Endorsement).where(
            Endorsement.org_mrn == org_mrn, Endorsement.service_mrn == service_mrn
        )
        try:
            return (await self._session.execute(stmt)).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreFailure(f"endorsement lookup failed: {e}") from e

    async def list_by_service(self, service_mrn: str, page: PageRequest) -> Page[Endorsement]:
        return await self._page(page, Endorsement.service_mrn == service_mrn)

    async def list_all_by_service(self, service_mrn: str) -> list[Endorsement]:
        stmt = (
            select(Endorsement)
            .where(Endorsement.service_mrn == service_mrn)
            .order_by(*_ORDERING)
        )
        try:
            return list((await self._session.execute(stmt)).scalars().all())
        except SQLAlchemyError as e:
            raise StoreFailure(f"endorsement listing failed: {e}") from e

    async def list_by_org_and_level(
        self, org_mrn: str, service_level: str, page: PageRequest
    ) -> Page[Endorsement]:
        return await self._page(
            page,
            Endorsement.org_mrn == org_mrn,
            Endorsement.service_level == service_level,
        )

    async def list_by_parent(self, parent_mrn: str, page: PageRequest) -> Page[Endorsement]:
        return await self._page(page, Endorsement.parent_mrn == parent_mrn)

    async def list_by_parent_and_org(
        self, parent_mrn: str, org_mrn: str, page: PageRequest
    ) -> Page[Endorsement]:
        return await self._page(
            page,
            Endorsement.parent_mrn == parent_mrn,
            Endorsement.org_mrn == org_mrn,
        )

    async def save(self, endorsement: Endorsement) -> Endorsement:
        # New instances are added; persistent ones are already tracked by the session
        # and only need their pending changes flushed.
        if endorsement not in self._session:
            self._session.add(endorsement)
        else:
            endorsement.updated_at = utcnow()
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise StoreFailure(f"endorsement save failed: {e}") from e
        return endorsement

    async def delete(self, endorsement: Endorsement) -> None:
        try:
            await self._session.delete(endorsement)
            await self._session.flush()
        except SQLAlchemyError as e:
            raise StoreFailure(f"endorsement delete failed: {e}") from e

    async def _page(self, page: PageRequest, *criteria: ColumnElement[Any]) -> Page[Endorsement]:
        count_stmt = select(func.count()).select_from(Endorsement).where(*criteria)
        stmt = (
            select(Endorsement)
            .where(*criteria)
            .order_by(*_ORDERING)
            .offset(page.offset)
            .limit(page.size)
        )
        try:
            total = (await self._session.execute(count_stmt)).scalar_one()
            rows = list((await self._session.execute(stmt)).scalars().all())
        except SQLAlchemyError as e:
            raise StoreFailure(f"endorsement listing failed: {e}") from e
        return Page(content=rows, page=page.page, size=page.size, total_elements=total)


# --- Module Notes -----------------------------------------------------------
# A concurrent insert of the same (org, service) pair violates
# `uq_endorsements_org_service` and surfaces as `StoreFailure` from `save`.
