# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provides session resolution from Supabase Auth access tokens.
#
# Usage:
#   from app.auth import get_session_optional, AuthSession
#
#   @router.get("/page")
#   async def page(session: AuthSession | None = Depends(get_session_optional)):
#       if session is None:
#           return RedirectResponse("/")
# =============================================================================

from app.auth.dependencies import (
    decode_session_token,
    get_current_session,
    get_current_user,
    get_session_optional,
    InvalidSessionToken,
)
from app.auth.models import AuthSession, AuthUser, UserResponse

__all__ = [
    "decode_session_token",
    "get_current_session",
    "get_current_user",
    "get_session_optional",
    "InvalidSessionToken",
    "AuthSession",
    "AuthUser",
    "UserResponse",
]
