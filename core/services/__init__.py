# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .profile_service import ProfileService
from .species_service import SpeciesService, is_species_author, parse_species_create

__all__ = [
    "ProfileService",
    "SpeciesService",
    "is_species_author",
    "parse_species_create",
]
