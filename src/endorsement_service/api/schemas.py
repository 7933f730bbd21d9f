"""
endorsement_service.api.schemas

Request/response models for the endorsement API (camelCase on the wire).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from endorsement_service.db.models import MRN_MAX_LENGTH, Endorsement
from endorsement_service.services.endorsement_service import EndorsementList
from endorsement_service.services.paging import Page


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EndorsementIn(_CamelModel):
    # Blank MRNs are rejected by the service (400), not here.
    org_mrn: str = Field(max_length=MRN_MAX_LENGTH)
    service_mrn: str = Field(max_length=MRN_MAX_LENGTH)
    user_mrn: str | None = Field(default=None, max_length=MRN_MAX_LENGTH)
    parent_mrn: str | None = Field(default=None, max_length=MRN_MAX_LENGTH)
    service_level: str | None = Field(default=None, max_length=64)

    def to_model(self) -> Endorsement:
        return Endorsement(
            org_mrn=self.org_mrn,
            service_mrn=self.service_mrn,
            user_mrn=self.user_mrn,
            parent_mrn=self.parent_mrn,
            service_level=self.service_level,
        )


class EndorsementOut(_CamelModel):
    model_config = ConfigDict(from_attributes=True)

    org_mrn: str
    service_mrn: str
    user_mrn: str | None = None
    parent_mrn: str | None = None
    service_level: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EndorsementPage(_CamelModel):
    content: list[EndorsementOut]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page[Endorsement]) -> EndorsementPage:
        return cls(
            content=[EndorsementOut.model_validate(e) for e in page.content],
            number=page.page,
            size=page.size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number_of_elements=page.number_of_elements,
            first=page.first,
            last=page.last,
        )


class EndorsementListOut(_CamelModel):
    service_mrn: str
    endorsements: list[EndorsementOut]

    @classmethod
    def from_list(cls, item: EndorsementList) -> EndorsementListOut:
        return cls(
            service_mrn=item.service_mrn,
            endorsements=[EndorsementOut.model_validate(e) for e in item.endorsements],
        )
