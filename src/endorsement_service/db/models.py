"""
endorsement_service.db.models

Persistence schema for endorsements.

Responsibilities:
- Define the `Endorsement` ORM model: an organization vouching for a service MRN,
  optionally narrowed to a user MRN.
- Declare the identity key `(org_mrn, service_mrn)` and the secondary access paths
  used by listings.
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from sqlalchemy import DateTime, Index, String, UniqueConstraint, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from endorsement_service.db.base import Base

MRN_MAX_LENGTH = 255


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


class Endorsement(Base):
    __tablename__ = "endorsements"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )

    org_mrn: Mapped[str] = mapped_column(String(MRN_MAX_LENGTH), nullable=False)
    service_mrn: Mapped[str] = mapped_column(String(MRN_MAX_LENGTH), nullable=False, index=True)
    user_mrn: Mapped[str | None] = mapped_column(String(MRN_MAX_LENGTH), nullable=True)
    parent_mrn: Mapped[str | None] = mapped_column(
        String(MRN_MAX_LENGTH), nullable=True, index=True
    )
    service_level: Mapped[str | None] = mapped_column(String(64), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    __table_args__ = (
        UniqueConstraint("org_mrn", "service_mrn", name="uq_endorsements_org_service"),
        Index("ix_endorsements_org_level", "org_mrn", "service_level"),
        Index("ix_endorsements_parent_org", "parent_mrn", "org_mrn"),
    )

    def __repr__(self) -> str:
        return (
            f"Endorsement(org_mrn={self.org_mrn!r}, service_mrn={self.service_mrn!r}, "
            f"user_mrn={self.user_mrn!r})"
        )
