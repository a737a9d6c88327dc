# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: Actual signup/login is handled by Supabase Auth client-side.
# The browser hands its access token to POST /session, which stores it in
# an HttpOnly cookie so server-rendered pages can resolve the session.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.config import settings
from app.auth.dependencies import (
    InvalidSessionToken,
    decode_session_token,
    get_current_session,
    get_current_user,
)
from app.auth.models import AuthSession, AuthUser, SessionTokenRequest, UserResponse
from core.services.profile_service import ProfileService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/session")
async def create_browser_session(body: SessionTokenRequest, response: Response) -> dict:
    """
    Store a Supabase access token in the session cookie.

    Raises:
        401: If the token is invalid or expired
    """
    try:
        session = decode_session_token(body.access_token)
    except InvalidSessionToken as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=body.access_token,
        max_age=settings.SESSION_COOKIE_MAX_AGE,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )
    logger.info(f"Started browser session for user: {session.user.id}")
    return {"user_id": session.user.id, "expires_at": session.expires_at}


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def end_browser_session(response: Response) -> None:
    """Clear the session cookie (sign out)."""
    response.delete_cookie(settings.SESSION_COOKIE_NAME)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    user: AuthUser = Depends(get_current_user)
) -> UserResponse:
    """
    Get the current authenticated user's profile.

    Raises:
        401: If not authenticated
    """
    profile = ProfileService.get_profile(user.id)

    if profile:
        return UserResponse(**profile.model_dump())

    # User exists in auth but not yet in public.profiles
    return UserResponse(id=user.id, email=user.email)


@router.get("/verify")
async def verify_token(
    session: AuthSession = Depends(get_current_session)
) -> dict:
    """
    Verify that the current token is valid.

    Raises:
        401: If token is invalid or expired
    """
    return {
        "valid": True,
        "user_id": session.user.id,
        "email": session.user.email,
        "expires_at": session.expires_at,
    }
