# =============================================================================
# app/views/species_card.py - Species Card Component
# =============================================================================
# One card per species in the catalog grid.
#
# Each card owns its view state:
# - is_hovered: whether the pointer is over the card
# - author_name: the author's display name, resolved after mount
#
# The author name is fetched by a task keyed on species.author. Changing
# the author cancels the pending fetch and starts a new one; unmounting
# cancels it. A result that arrives for a stale key or an unmounted card
# is dropped.
#
# Browser side effects (confirm dialog, alert, page reload) go through a
# BrowserEffects object. SpeciesCard.delete is the reference behavior for
# the delete script on the list page, which is rendered from the same
# confirmation text and alert prefix.
# =============================================================================

import asyncio
import logging
from typing import Protocol

from app.exceptions import SpeciesCatalogException
from app.templating import templates
from core.models.species import Species
from core.services.profile_service import ProfileService
from core.services.species_service import SpeciesService, is_species_author
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger(__name__)

DESCRIPTION_PREVIEW_LENGTH = 150
DELETE_CONFIRMATION = "Are you sure you want to delete this species?"
DELETE_ERROR_PREFIX = "Error deleting species: "


class BrowserEffects(Protocol):
    """Side effects the card asks of the page it lives in."""

    def confirm(self, message: str) -> bool: ...

    def alert(self, message: str) -> None: ...

    def reload(self) -> None: ...


def preview_description(description: str | None) -> str:
    """
    Shorten a description for the card.

    Example:
        preview_description("A" * 200)  # "AAA...A..." (150 A's then "...")
        preview_description(None)       # ""
    """
    if not description:
        return ""
    return description[:DESCRIPTION_PREVIEW_LENGTH].strip() + "..."


class SpeciesCard:
    """
    View state and behavior of a single species card.

    Example:
        card = SpeciesCard(species, current_user=session.user.id)
        await card.mount()          # resolves author_name
        card.mouse_enter()
        card.show_delete_button     # True if the viewer is the author
        html = card.render()
    """

    def __init__(self, species: Species, current_user: str | None):
        self.species = species
        self.current_user = current_user
        self.is_hovered = False
        self.author_name = ""
        self._mounted = False
        self._author_task: asyncio.Task | None = None

    @property
    def key(self) -> int:
        return self.species.id

    @property
    def is_owner(self) -> bool:
        return is_species_author(self.species, self.current_user)

    @property
    def show_delete_button(self) -> bool:
        return self.is_hovered and self.is_owner

    @property
    def description_preview(self) -> str:
        return preview_description(self.species.description)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def mount(self) -> asyncio.Task | None:
        """
        Attach the card and start resolving the author name.

        Must be called from a running event loop.

        Returns:
            The fetch task, or None when the species has no author.
            Mounting an already mounted card returns the pending task.
        """
        if self._mounted:
            return self._author_task
        self._mounted = True
        return self._start_author_fetch()

    def update(
        self,
        species: Species | None = None,
        current_user: str | None = None,
    ) -> asyncio.Task | None:
        """
        Receive new input properties.

        Re-fetches the author name only when the author id changed.

        Returns:
            The new fetch task, if one was started
        """
        previous_author = self.species.author

        if species is not None:
            self.species = species
        if current_user is not None:
            self.current_user = current_user

        if self.species.author == previous_author:
            return None

        self._cancel_author_fetch()
        self.author_name = ""
        if not self._mounted:
            return None
        return self._start_author_fetch()

    def unmount(self) -> None:
        """Detach the card; any pending author fetch is cancelled."""
        self._mounted = False
        self._cancel_author_fetch()

    def _start_author_fetch(self) -> asyncio.Task | None:
        author = self.species.author
        if not author:
            return None
        self._author_task = asyncio.create_task(self._load_author_name(author))
        return self._author_task

    def _cancel_author_fetch(self) -> None:
        if self._author_task is not None and not self._author_task.done():
            self._author_task.cancel()
        self._author_task = None

    async def _load_author_name(self, author: str) -> None:
        try:
            name = await asyncio.to_thread(ProfileService.get_display_name, author)
        except SupabaseClientError as e:
            logger.error(f"Error fetching author details for species {self.key}: {e}")
            return

        if not self._mounted or self.species.author != author:
            logger.debug(f"Dropping stale author name for species {self.key}")
            return

        self.author_name = name

    # -------------------------------------------------------------------------
    # Interaction
    # -------------------------------------------------------------------------

    def mouse_enter(self) -> None:
        self.is_hovered = True

    def mouse_leave(self) -> None:
        self.is_hovered = False

    async def delete(self, effects: BrowserEffects) -> bool:
        """
        Delete this species after the user confirms.

        On failure the user is alerted and nothing else changes; on success
        the page is reloaded so the list is fetched again.

        Returns:
            True if the species was deleted
        """
        if not effects.confirm(DELETE_CONFIRMATION):
            return False

        try:
            await asyncio.to_thread(
                SpeciesService.delete_species, self.species.id, self.current_user
            )
        except SpeciesCatalogException as e:
            effects.alert(f"{DELETE_ERROR_PREFIX}{e.message}")
            return False

        effects.reload()
        return True

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Render the card as an HTML fragment."""
        return templates.get_template("species/_card.html").render(card=self)
