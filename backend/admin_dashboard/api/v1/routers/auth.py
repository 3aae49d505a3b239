# admin_dashboard/api/v1/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response, status

from admin_dashboard.api.v1.deps import get_session_claims, get_user_store
from admin_dashboard.config import settings
from admin_dashboard.core.security import (
    ACCESS_TOKEN_COOKIE,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
)
from admin_dashboard.schemas.auth import LoginRequest, SessionClaims
from admin_dashboard.services.authenticator import authenticate
from admin_dashboard.services.user_store import UserStore

router = APIRouter(prefix="/auth", tags=["auth"])

INVALID_CREDENTIALS = {"code": "AUTH_INVALID_CREDENTIALS", "message": "Invalid email or password"}


@router.post("/login")
async def login(payload: LoginRequest, response: Response, store: UserStore = Depends(get_user_store)):
    """
    Authenticate with email and password and open a session.

    The signed token is returned in the response body and also set as an
    HttpOnly cookie for the dashboard pages.

    Returns:
        dict: Response containing:
            - success: bool (always True on success)
            - data: dict with:
                - user: session claims (id, name, email, role)
                - accessToken: JWT token string

    Raises:
        HTTPException (401): Same body for unknown email, deactivated account and wrong password
    """
    claims = await authenticate(store, payload.email, payload.password)
    if claims is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_CREDENTIALS)

    token = create_access_token(claims.id, claims.name, claims.email, claims.role.value)
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        token,
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return {"success": True, "data": {"user": claims.model_dump(mode="json"), "accessToken": token}}


@router.get("/me")
async def me(claims: SessionClaims = Depends(get_session_claims)):
    """
    Return the claims of the current session.

    Raises:
        HTTPException (401): If user is not authenticated
    """
    return {"success": True, "data": claims.model_dump(mode="json")}


@router.post("/logout")
async def logout(response: Response):
    """
    Log out by clearing the access token cookie.

    Note:
        The token itself stays valid until it expires; there is no
        server-side session to revoke.
    """
    response.delete_cookie(ACCESS_TOKEN_COOKIE)
    return {"success": True}
