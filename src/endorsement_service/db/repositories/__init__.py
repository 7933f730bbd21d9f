"""
endorsement_service.db.repositories

Repository package.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories stay thin; endorsement business rules live in `services`.
