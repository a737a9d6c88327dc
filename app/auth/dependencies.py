# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Resolves the current session from a Supabase access token.
#
# The token is read from the Authorization header (API clients) or from
# the session cookie (browser pages). Supports both:
# - ES256 (new Supabase JWT signing keys) via JWKS
# - HS256 (legacy Supabase JWT secret) as fallback
#
# Usage:
#   from app.auth import get_current_session, AuthSession
#
#   @router.get("/protected")
#   async def protected(session: AuthSession = Depends(get_current_session)):
#       return {"user_id": session.user.id}
# =============================================================================

import logging
import time
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

import httpx
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError

from app.config import settings
from app.auth.models import AuthSession, AuthUser

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; missing header is not an error here
security_optional = HTTPBearer(auto_error=False)

# Cache for JWKS keys
_jwks_cache: dict = {}
_jwks_cache_time: float = 0
JWKS_CACHE_TTL = 3600  # 1 hour


class InvalidSessionToken(Exception):
    """Raised when an access token can't be verified."""


def _get_jwks_url() -> str:
    """Get the JWKS URL from Supabase URL."""
    supabase_url = settings.SUPABASE_URL.rstrip('/')
    return f"{supabase_url}/auth/v1/.well-known/jwks.json"


def _fetch_jwks() -> dict:
    """Fetch JWKS from Supabase with caching."""
    global _jwks_cache, _jwks_cache_time

    current_time = time.time()

    if _jwks_cache and (current_time - _jwks_cache_time) < JWKS_CACHE_TTL:
        return _jwks_cache

    try:
        jwks_url = _get_jwks_url()
        response = httpx.get(jwks_url, timeout=10)
        response.raise_for_status()
        _jwks_cache = response.json()
        _jwks_cache_time = current_time
        logger.debug(f"Fetched JWKS from {jwks_url}")
        return _jwks_cache
    except httpx.HTTPError as e:
        logger.warning(f"Failed to fetch JWKS: {e}")
        # Return cached even if expired, as fallback
        if _jwks_cache:
            return _jwks_cache
        return {"keys": []}


def _get_signing_key(token: str) -> tuple[str | dict, str]:
    """
    Get the appropriate signing key for a token.

    Returns:
        Tuple of (key, algorithm) to use for verification
    """
    try:
        unverified_header = jwt.get_unverified_header(token)
    except JWTError:
        return settings.SUPABASE_JWT_SECRET, "HS256"

    alg = unverified_header.get("alg", "HS256")
    kid = unverified_header.get("kid")

    if alg == "HS256":
        return settings.SUPABASE_JWT_SECRET, "HS256"

    if kid:
        jwks = _fetch_jwks()
        for key in jwks.get("keys", []):
            if key.get("kid") == kid:
                return key, alg

    logger.warning(f"Could not find key for alg={alg}, kid={kid}, falling back to HS256")
    return settings.SUPABASE_JWT_SECRET, "HS256"


def decode_session_token(token: str) -> AuthSession:
    """
    Verify a Supabase access token and build the session it represents.

    Raises:
        InvalidSessionToken: If the signature, expiry, audience or
            subject claim is invalid
    """
    try:
        signing_key, algorithm = _get_signing_key(token)
        payload = jwt.decode(
            token,
            signing_key,
            algorithms=[algorithm],
            audience="authenticated"
        )
    except ExpiredSignatureError:
        raise InvalidSessionToken("Token has expired")
    except JWTError as e:
        raise InvalidSessionToken(f"Invalid token: {str(e)}")

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidSessionToken("Invalid token: missing user ID")

    try:
        user_uuid = UUID(user_id)
    except ValueError:
        raise InvalidSessionToken("Invalid token: malformed user ID")

    exp = payload.get("exp")
    expires_at = datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None

    return AuthSession(
        access_token=token,
        user=AuthUser(id=str(user_uuid), email=payload.get("email")),
        expires_at=expires_at,
    )


def _extract_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Bearer header wins over the session cookie."""
    if credentials is not None:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


async def get_session_optional(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> Optional[AuthSession]:
    """
    Resolve the current session, or None.

    Missing, expired and invalid tokens all yield None; pages use this
    to decide whether to redirect.
    """
    token = _extract_token(request, credentials)
    if not token:
        return None

    try:
        session = decode_session_token(token)
    except InvalidSessionToken as e:
        logger.info(f"Ignoring session token: {e}")
        return None

    logger.debug(f"Resolved session for user: {session.user.id}")
    return session


async def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional),
) -> AuthSession:
    """
    Require a valid session.

    Raises:
        HTTPException: 401 if no token is present or it is invalid
    """
    token = _extract_token(request, credentials)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_session_token(token)
    except InvalidSessionToken as e:
        logger.warning(f"JWT validation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def get_current_user(
    session: AuthSession = Depends(get_current_session),
) -> AuthUser:
    """Require a valid session and return its user."""
    return session.user
