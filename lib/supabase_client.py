# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides the queries the species catalog needs:
# - Species rows (list, single, insert, update, delete)
# - Profile rows for resolving author display names
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   rows = SupabaseClient.fetch_species_list()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import is_not_found_error, normalize_id

logger = logging.getLogger(__name__)

SPECIES_TABLE = "species"
PROFILES_TABLE = "profiles"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code and an actionable suggestion.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result

    @property
    def backend_error(self) -> str:
        """The backend's own error text, without the wrapper prefix."""
        return self.details.get("error", self.message)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        species = SupabaseClient.fetch_species_list()
        profile = SupabaseClient.fetch_profile(species[0]["author"])
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS);
        ownership rules are applied by the service layer.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Species
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_species_list(cls) -> list[dict[str, Any]]:
        """
        Fetch every species row, newest identifier first.

        Equivalent to: select * from species order by id desc

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SPECIES_TABLE)
                .select("*")
                .order("id", desc=True)
                .execute()
            )

            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} species rows")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch species: {e}",
                code="FETCH_SPECIES_FAILED",
                suggestion="Check that the species table exists and is readable",
            )

    @classmethod
    def fetch_species(cls, species_id: int) -> dict[str, Any] | None:
        """
        Fetch a single species by ID.

        Returns:
            Species dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SPECIES_TABLE)
                .select("*")
                .eq("id", species_id)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            if is_not_found_error(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch species: {e}",
                code="FETCH_SPECIES_FAILED",
                suggestion="Check that the species_id exists",
                details={"species_id": species_id, "error": str(e)}
            )

    @classmethod
    def insert_species(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new species row.

        Returns:
            Inserted species dict with generated id

        Raises:
            SupabaseClientError: If insert fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SPECIES_TABLE)
                .insert(data)
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA"
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert species: {e}",
                code="INSERT_SPECIES_FAILED",
                details={"scientific_name": data.get("scientific_name")}
            )

    @classmethod
    def update_species(cls, species_id: int, data: dict[str, Any]) -> dict[str, Any] | None:
        """
        Update columns of a species row.

        Returns:
            Updated species dict, or None if no row matched

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(SPECIES_TABLE)
                .update(data)
                .eq("id", species_id)
                .execute()
            )

            return response.data[0] if response.data else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update species: {e}",
                code="UPDATE_SPECIES_FAILED",
                details={"species_id": species_id}
            )

    @classmethod
    def delete_species(cls, species_id: int) -> None:
        """
        Delete the species row matching the identifier.

        Equivalent to: delete from species where id = <species_id>

        Raises:
            SupabaseClientError: If delete fails
        """
        client = cls.get_client()

        try:
            client.table(SPECIES_TABLE).delete().match({"id": species_id}).execute()
            logger.info(f"Deleted species: {species_id}")

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete species: {e}",
                code="DELETE_SPECIES_FAILED",
                suggestion="Try again later or check the species table permissions",
                details={"species_id": species_id, "error": str(e)}
            )

    # -------------------------------------------------------------------------
    # Profiles
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_profile(
        cls,
        user_id: str | UUID,
        columns: str = "*",
    ) -> dict[str, Any]:
        """
        Fetch exactly one profile row for a user.

        Args:
            user_id: The profile (user) identifier
            columns: Columns to select (default: all)

        Raises:
            SupabaseClientError: If query fails or no single row matches
        """
        client = cls.get_client()
        user_id_str = normalize_id(user_id)

        try:
            response = (
                client.table(PROFILES_TABLE)
                .select(columns)
                .eq("id", user_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            code = "PROFILE_NOT_FOUND" if is_not_found_error(e) else "FETCH_PROFILE_FAILED"
            raise SupabaseClientError(
                message=f"Failed to fetch profile: {e}",
                code=code,
                suggestion="Check that a profile row exists for this user",
                details={"user_id": user_id_str}
            )

    @classmethod
    def ping(cls) -> None:
        """
        Run a minimal query to confirm the database is reachable.

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            client.table(SPECIES_TABLE).select("id").limit(1).execute()
        except Exception as e:
            raise SupabaseClientError(
                message=f"Database check failed: {e}",
                code="PING_FAILED",
            )
