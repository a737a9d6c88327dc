# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - species.py: Species records and create/update payloads
# - profile.py: User profiles (author display names)
# =============================================================================

from .profile import Profile
from .species import (
    Kingdom,
    Species,
    SpeciesCreate,
    SpeciesUpdate,
)

__all__ = [
    "Kingdom",
    "Profile",
    "Species",
    "SpeciesCreate",
    "SpeciesUpdate",
]
