# =============================================================================
# app/views/ - Page Components
# =============================================================================
# - species_card.py: Per-species card with hover, author lookup and delete
# - species_list.py: Builds the cards for the catalog page
# =============================================================================

from app.views.species_card import (
    BrowserEffects,
    SpeciesCard,
    preview_description,
)
from app.views.species_list import build_species_cards

__all__ = [
    "BrowserEffects",
    "SpeciesCard",
    "build_species_cards",
    "preview_description",
]
