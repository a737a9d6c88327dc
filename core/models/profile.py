# =============================================================================
# core/models/profile.py - User Profile Schemas
# =============================================================================
# A profile row exists for every signed-up user and carries the
# human-readable display name shown as a species' author.
# =============================================================================

from pydantic import BaseModel, Field


class Profile(BaseModel):
    """
    A row of the profiles table.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "email": "jane@example.com",
            "display_name": "Jane Goodall",
            "biography": null
        }
    """

    id: str = Field(..., description="User identifier (same as auth user id)")
    email: str | None = None
    display_name: str = Field(default="", description="Human-readable name")
    biography: str | None = None
