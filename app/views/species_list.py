# =============================================================================
# app/views/species_list.py - Species List View
# =============================================================================
# Builds the cards for the catalog page: one fetch for the collection,
# then every card resolves its own author name concurrently.
# =============================================================================

import asyncio
import logging

from app.auth.models import AuthSession
from app.views.species_card import SpeciesCard
from core.services.species_service import SpeciesService

logger = logging.getLogger(__name__)


async def build_species_cards(session: AuthSession) -> list[SpeciesCard]:
    """
    Fetch the catalog and mount one card per species.

    Cards keep the query order (identifier descending). If the fetch
    fails the list is empty.
    """
    species = await asyncio.to_thread(SpeciesService.list_species)
    cards = [SpeciesCard(s, current_user=session.user.id) for s in species]

    tasks = [task for task in (card.mount() for card in cards) if task is not None]
    if tasks:
        await asyncio.gather(*tasks)

    logger.debug(f"Built {len(cards)} species cards for user: {session.user.id}")
    return cards
