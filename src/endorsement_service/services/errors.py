"""
endorsement_service.services.errors

Typed failures raised by the endorsement service.
"""

from __future__ import annotations


class EndorsementError(Exception):
    """Base class for endorsement service errors."""


class InvalidEndorsement(EndorsementError):
    """Required MRNs are missing or blank."""


class AccessDenied(EndorsementError):
    def __init__(self, org_mrn: str) -> None:
        super().__init__(f"caller may not act for organization {org_mrn!r}")
        self.org_mrn = org_mrn


class EndorsementNotFound(EndorsementError):
    def __init__(self, org_mrn: str, service_mrn: str) -> None:
        super().__init__(f"no endorsement of {service_mrn!r} by {org_mrn!r}")
        self.org_mrn = org_mrn
        self.service_mrn = service_mrn


class StoreFailure(EndorsementError):
    """The backing store failed; the cause is chained."""
