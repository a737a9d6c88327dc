# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from Supabase JWT.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    id: str
    email: Optional[str] = None

    model_config = {"frozen": True}


class AuthSession(BaseModel):
    """
    The current browser or API session.

    Built from a verified access token; holds the signed-in user.
    """
    access_token: str
    user: AuthUser
    expires_at: Optional[datetime] = None

    model_config = {"frozen": True}


class UserResponse(BaseModel):
    """
    Full user response for API endpoints.

    Includes profile data from the public.profiles table.
    """
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    biography: Optional[str] = None


class SessionTokenRequest(BaseModel):
    """Access token handed over by the browser after Supabase sign-in."""
    access_token: str = Field(..., min_length=1)
