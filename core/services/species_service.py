# =============================================================================
# core/services/species_service.py - Species Business Logic
# =============================================================================
# Handles species CRUD operations and ownership rules.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging

from pydantic import ValidationError

from lib.supabase_client import SupabaseClient, SupabaseClientError
from core.models.species import Species, SpeciesCreate, SpeciesUpdate
from app.exceptions import (
    InvalidSpeciesError,
    NotSpeciesAuthorError,
    SpeciesDeleteError,
    SpeciesNotFoundError,
    SpeciesWriteError,
)

logger = logging.getLogger(__name__)


def is_species_author(species: Species, user_id: str | None) -> bool:
    """
    Check whether a user owns a species.

    The card's delete button and the delete operation both use this,
    so what the viewer sees always matches what the server allows.
    """
    return species.author is not None and species.author == user_id


class SpeciesService:
    """
    Service for species catalog operations.

    Provides a clean interface between routes/views and the database.
    """

    @staticmethod
    def list_species() -> list[Species]:
        """
        List all species, ordered by identifier descending.

        A failed fetch is logged and treated as an empty collection.
        Rows that can't be read as a Species are logged and skipped.
        """
        try:
            rows = SupabaseClient.fetch_species_list()
        except SupabaseClientError as e:
            logger.error(f"Failed to list species: {e}")
            return []

        species = []
        for row in rows:
            try:
                species.append(Species.model_validate(row))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable species row {row.get('id')}: {e}")
        return species

    @staticmethod
    def get_species(species_id: int) -> Species:
        """
        Get a species by ID.

        Raises:
            SpeciesNotFoundError: If the species doesn't exist
        """
        row = SupabaseClient.fetch_species(species_id)

        if not row:
            raise SpeciesNotFoundError(species_id)

        return Species.model_validate(row)

    @staticmethod
    def create_species(data: SpeciesCreate, author_id: str) -> Species:
        """
        Add a species owned by author_id.

        Raises:
            SpeciesWriteError: If the insert fails
        """
        payload = data.model_dump(mode="json")
        payload["author"] = author_id

        try:
            row = SupabaseClient.insert_species(payload)
        except SupabaseClientError as e:
            logger.error(f"Failed to create species: {e}")
            raise SpeciesWriteError(e.message)

        logger.info(f"Created species: {row['id']} for user: {author_id}")
        return Species.model_validate(row)

    @staticmethod
    def update_species(species_id: int, data: SpeciesUpdate, user_id: str) -> Species:
        """
        Update a species. Only its author may do this.

        Raises:
            SpeciesNotFoundError: If the species doesn't exist
            NotSpeciesAuthorError: If user_id is not the author
            SpeciesWriteError: If the update fails
        """
        species = SpeciesService.get_species(species_id)

        if not is_species_author(species, user_id):
            raise NotSpeciesAuthorError(species_id)

        update_data = data.model_dump(mode="json", exclude_unset=True)
        if not update_data:
            return species  # Nothing to update

        try:
            row = SupabaseClient.update_species(species_id, update_data)
        except SupabaseClientError as e:
            logger.error(f"Failed to update species {species_id}: {e}")
            raise SpeciesWriteError(e.message)

        if row is None:
            raise SpeciesNotFoundError(species_id)

        logger.info(f"Updated species: {species_id}")
        return Species.model_validate(row)

    @staticmethod
    def delete_species(species_id: int, user_id: str) -> None:
        """
        Delete a species. Only its author may do this.

        Raises:
            SpeciesNotFoundError: If the species doesn't exist
            NotSpeciesAuthorError: If user_id is not the author
            SpeciesDeleteError: If the storage backend fails
        """
        try:
            species = SpeciesService.get_species(species_id)
        except SupabaseClientError as e:
            raise SpeciesDeleteError(species_id, e.backend_error)

        if not is_species_author(species, user_id):
            logger.warning(f"User {user_id} tried to delete species {species_id} they don't own")
            raise NotSpeciesAuthorError(species_id)

        try:
            SupabaseClient.delete_species(species_id)
        except SupabaseClientError as e:
            logger.error(f"Failed to delete species {species_id}: {e}")
            raise SpeciesDeleteError(species_id, e.backend_error)


def parse_species_create(data: dict) -> SpeciesCreate:
    """
    Validate raw (form or JSON) input into a SpeciesCreate.

    Raises:
        InvalidSpeciesError: If validation fails
    """
    try:
        return SpeciesCreate.model_validate(data)
    except ValidationError as e:
        raise InvalidSpeciesError(e.errors())
