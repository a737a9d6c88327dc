# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides sample species/profile rows and signed access tokens
# =============================================================================

import os
import time

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from jose import jwt

OWNER_ID = "11111111-1111-1111-1111-111111111111"
OTHER_USER_ID = "22222222-2222-2222-2222-222222222222"


def make_access_token(
    user_id: str = OWNER_ID,
    email: str | None = "owner@example.com",
    expires_in: int = 3600,
    audience: str = "authenticated",
    secret: str | None = None,
) -> str:
    """Sign a Supabase-style HS256 access token."""
    claims = {
        "sub": user_id,
        "aud": audience,
        "exp": int(time.time()) + expires_in,
        "iat": int(time.time()),
        "role": "authenticated",
    }
    if email:
        claims["email"] = email
    return jwt.encode(
        claims,
        secret or os.environ["SUPABASE_JWT_SECRET"],
        algorithm="HS256",
    )


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def owner_token():
    """Valid access token for the species owner."""
    return make_access_token()


@pytest.fixture
def other_token():
    """Valid access token for a user who owns nothing."""
    return make_access_token(user_id=OTHER_USER_ID, email="other@example.com")


@pytest.fixture
def sample_species_rows():
    """Species rows as Supabase returns them (id descending)."""
    return [
        {
            "id": 7,
            "scientific_name": "Panthera leo",
            "common_name": "Lion",
            "kingdom": "Animalia",
            "total_population": 20000,
            "description": "The lion is a large cat of the genus Panthera.",
            "image": "https://example.com/lion.jpg",
            "author": OWNER_ID,
        },
        {
            "id": 5,
            "scientific_name": "Quercus robur",
            "common_name": "English oak",
            "kingdom": "Plantae",
            "total_population": None,
            "description": None,
            "image": None,
            "author": OTHER_USER_ID,
        },
        {
            "id": 2,
            "scientific_name": "Amanita muscaria",
            "common_name": "Fly agaric",
            "kingdom": "Fungi",
            "total_population": None,
            "description": "A" * 200,
            "image": None,
            "author": OWNER_ID,
        },
    ]


@pytest.fixture
def sample_profile_row():
    """Profile row for the owner."""
    return {
        "id": OWNER_ID,
        "email": "owner@example.com",
        "display_name": "Jane Goodall",
        "biography": None,
    }
