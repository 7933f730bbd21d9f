"""
endorsement_service.auth

Authentication/authorization package.

Responsibilities:
- JWT helpers and validation.
- FastAPI dependency turning a bearer token into a `Principal`.
- Organization access control used to gate endorsement writes.
"""

# Package marker.
