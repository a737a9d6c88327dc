# =============================================================================
# core/services/profile_service.py - Profile Lookups
# =============================================================================
# Resolves user identifiers to profiles and display names.
# Nothing is cached: every call reads the profiles table.
# =============================================================================

import logging

from lib.supabase_client import SupabaseClient, SupabaseClientError
from core.models.profile import Profile

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for reading user profiles."""

    @staticmethod
    def get_display_name(user_id: str) -> str:
        """
        Get the display name for a user.

        Expects exactly one profile row.

        Raises:
            SupabaseClientError: If the lookup fails or no single row matches
        """
        row = SupabaseClient.fetch_profile(user_id, columns="display_name")
        return (row or {}).get("display_name") or ""

    @staticmethod
    def get_profile(user_id: str) -> Profile | None:
        """
        Get the full profile for a user, or None if it can't be read.
        """
        try:
            row = SupabaseClient.fetch_profile(user_id)
        except SupabaseClientError as e:
            logger.warning(f"Could not fetch profile for {user_id}: {e}")
            return None

        return Profile.model_validate(row) if row else None
