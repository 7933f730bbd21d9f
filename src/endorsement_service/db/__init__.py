"""
endorsement_service.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide the ORM model, engine/session setup, and the endorsement repository.
"""

# Package marker.
