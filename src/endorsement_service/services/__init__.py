"""
endorsement_service.services

Service-layer package.

Responsibilities:
- Endorsement business rules (upsert merge, batch lookup, delete sequencing).
- Authorization of mutating operations.
- Store and access-control contracts the service depends on.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are plain Python over narrow contracts and are tested with the real
# repository on SQLite or with small fakes.
