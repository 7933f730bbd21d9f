"""
endorsement_service.api

API package for the endorsement service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request/response models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request parsing + identity extraction + delegation to
# `EndorsementService` + mapping its failures onto HTTP statuses.
