"""
tests.test_endorsement_repo

EndorsementRepo queries, paging and the identity-key constraint on SQLite.
"""

from __future__ import annotations

import pytest
from helpers import ORG_A, SERVICE_X

from endorsement_service.db.models import Endorsement
from endorsement_service.db.repositories.endorsements import EndorsementRepo
from endorsement_service.services.errors import StoreFailure
from endorsement_service.services.paging import Page, PageRequest


async def _seed(repo: EndorsementRepo, count: int) -> list[Endorsement]:
    saved = []
    for i in range(count):
        saved.append(
            await repo.save(Endorsement(org_mrn=f"urn:mrn:org:{i}", service_mrn=SERVICE_X))
        )
    return saved


@pytest.mark.asyncio
async def test_save_assigns_store_fields(session) -> None:
    repo = EndorsementRepo(session)
    saved = await repo.save(Endorsement(org_mrn=ORG_A, service_mrn=SERVICE_X, user_mrn="u1"))

    assert saved.id is not None
    assert saved.created_at is not None
    assert saved.updated_at is not None
    assert await repo.find_by_org_and_service(ORG_A, SERVICE_X) is saved


@pytest.mark.asyncio
async def test_find_is_exact_on_both_keys(session) -> None:
    repo = EndorsementRepo(session)
    await repo.save(Endorsement(org_mrn=ORG_A, service_mrn=SERVICE_X))

    assert await repo.find_by_org_and_service(ORG_A, "urn:mrn:service:other") is None
    assert await repo.find_by_org_and_service("urn:mrn:org:other", SERVICE_X) is None


@pytest.mark.asyncio
async def test_paging_is_stable_and_complete(session) -> None:
    repo = EndorsementRepo(session)
    await _seed(repo, 5)

    pages = [await repo.list_by_service(SERVICE_X, PageRequest(page=i, size=2)) for i in range(3)]

    assert [p.number_of_elements for p in pages] == [2, 2, 1]
    assert all(p.total_elements == 5 and p.total_pages == 3 for p in pages)
    assert pages[0].first and not pages[0].last
    assert pages[2].last

    seen = [e.org_mrn for p in pages for e in p.content]
    assert sorted(seen) == sorted(f"urn:mrn:org:{i}" for i in range(5))

    again = await repo.list_by_service(SERVICE_X, PageRequest(page=1, size=2))
    assert [e.id for e in again.content] == [e.id for e in pages[1].content]

    assert await repo.list_all_by_service(SERVICE_X) == [e for p in pages for e in p.content]


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(session) -> None:
    repo = EndorsementRepo(session)
    await _seed(repo, 2)

    page = await repo.list_by_service(SERVICE_X, PageRequest(page=5, size=10))
    assert page.content == []
    assert page.total_elements == 2


@pytest.mark.asyncio
async def test_delete_removes_record(session) -> None:
    repo = EndorsementRepo(session)
    saved = await repo.save(Endorsement(org_mrn=ORG_A, service_mrn=SERVICE_X))

    await repo.delete(saved)
    assert await repo.find_by_org_and_service(ORG_A, SERVICE_X) is None


@pytest.mark.asyncio
async def test_duplicate_identity_key_is_a_store_failure(session) -> None:
    repo = EndorsementRepo(session)
    await repo.save(Endorsement(org_mrn=ORG_A, service_mrn=SERVICE_X))

    with pytest.raises(StoreFailure):
        await repo.save(Endorsement(org_mrn=ORG_A, service_mrn=SERVICE_X))


def test_page_arithmetic() -> None:
    page = Page(content=[1, 2], page=0, size=2, total_elements=5)
    assert page.total_pages == 3
    assert page.first and not page.last

    empty = Page(content=[], page=0, size=20, total_elements=0)
    assert empty.total_pages == 0
    assert empty.first and empty.last


@pytest.mark.parametrize(("page", "size"), [(-1, 10), (0, 0), (10**18, 20)])
def test_page_request_bounds(page: int, size: int) -> None:
    with pytest.raises(ValueError):
        PageRequest(page=page, size=size)
