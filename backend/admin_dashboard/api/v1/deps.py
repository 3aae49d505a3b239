# admin_dashboard/api/v1/deps.py
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from pydantic import ValidationError

from admin_dashboard.core.db import Database
from admin_dashboard.core.security import ACCESS_TOKEN_COOKIE, decode_access_token
from admin_dashboard.schemas.auth import SessionClaims
from admin_dashboard.services.user_store import UserStore


def get_database(request: Request) -> Database:
    """Return the ``Database`` handle created by the application lifespan."""
    return request.app.state.db


def get_user_store(db: Database = Depends(get_database)) -> UserStore:
    return UserStore(db)


def _extract_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    token = None
    # 1) Prioritize Authorization: Bearer xxx
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
    # 2) Secondly HttpOnly Cookie: accessToken
    if not token:
        token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    return token or None


def claims_from_token(token: str) -> SessionClaims:
    """
    Verify a token and rebuild its claims.

    Raises:
        HTTPException (401): signature, expiry or claim contents are invalid (AUTH_INVALID_TOKEN)
    """
    try:
        return SessionClaims.from_token_payload(decode_access_token(token))
    except (jwt.PyJWTError, KeyError, ValidationError):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_INVALID_TOKEN")


async def get_session_claims(
    request: Request,
    authorization: str | None = Header(default=None),
) -> SessionClaims:
    """
    FastAPI dependency returning the claims of the current session.

    The token is read from either:
    1. Authorization header (Bearer token) - preferred method
    2. HttpOnly cookie (accessToken) - fallback method

    Only the token is checked; the store is not queried, so a rejected
    request never reaches the database.

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)
        HTTPException (401): If token is invalid or expired (AUTH_INVALID_TOKEN)

    Usage:
        @router.get("/protected")
        async def protected_route(claims: SessionClaims = Depends(get_session_claims)):
            return {"user_id": claims.id}
    """
    token = _extract_token(request, authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")
    return claims_from_token(token)


async def require_admin(claims: SessionClaims = Depends(get_session_claims)) -> SessionClaims:
    """
    FastAPI dependency to ensure the current session belongs to an administrator.

    Raises:
        HTTPException (403): If the role claim is not admin (FORBIDDEN_ADMIN_ONLY)
        HTTPException (401): If the session is missing or invalid (from get_session_claims)
    """
    if not claims.is_admin:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="FORBIDDEN_ADMIN_ONLY")
    return claims


async def optional_session_claims(
    request: Request,
    authorization: str | None = Header(default=None),
) -> Optional[SessionClaims]:
    """
    Like ``get_session_claims`` but returns None instead of raising.
    Used by the HTML pages, which redirect to the sign-in page rather than answer 401.
    """
    try:
        return await get_session_claims(request, authorization)
    except HTTPException:
        return None
