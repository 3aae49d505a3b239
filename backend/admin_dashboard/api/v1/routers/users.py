# admin_dashboard/api/v1/routers/users.py
from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from admin_dashboard.api.v1.deps import get_user_store, require_admin
from admin_dashboard.models.user import Role, User
from admin_dashboard.schemas.auth import SessionClaims
from admin_dashboard.schemas.user import (
    PASSWORD_MIN_LENGTH,
    UserCreateIn,
    UserDeactivatedOut,
    UserOut,
    UserStatsOut,
    UserUpdateIn,
)
from admin_dashboard.services.user_store import UserStore

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/users", tags=["users"])


def _iso(value: Optional[dt.datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc).isoformat()


def _user_to_dict(u: User) -> dict:
    """
    Convert User model instance to dictionary format for API responses.
    Never includes the password hash.
    """
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "username": u.username,
        "role": u.role,
        "status": u.status,
        "createdAt": _iso(u.created_at),
        "updatedAt": _iso(u.updated_at),
        "lastLogin": _iso(u.last_login),
    }


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={"code": "USER_NOT_FOUND", "message": "User not found"},
    )


def _bad_request(code: str, message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"code": code, "message": message})


@router.get(
    "",
    response_model=List[UserOut],
    dependencies=[Depends(require_admin)],
)
async def list_users(store: UserStore = Depends(get_user_store)):
    """
    List every user, newest first (admin only).

    Deactivated users stay in the list with their status; the dashboard
    polls this endpoint to keep its table fresh.
    """
    rows = await store.list_users()
    return [_user_to_dict(u) for u in rows]


@router.get(
    "/stats",
    response_model=UserStatsOut,
    dependencies=[Depends(require_admin)],
)
async def user_stats(store: UserStore = Depends(get_user_store)):
    """Totals for the dashboard cards: all, active, deactivated, admin and recently created users."""
    return await store.count_by_status()


@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreateIn,
    store: UserStore = Depends(get_user_store),
    admin: SessionClaims = Depends(require_admin),
):
    """
    Create a user (admin only).

    Email is checked before username; both must be unused. The password is
    hashed by the store before the row is written.

    Raises:
        HTTPException (400): BAD_REQUEST, PASSWORD_TOO_SHORT, EMAIL_EXISTS, USERNAME_EXISTS
    """
    if body.missing_fields():
        raise _bad_request("BAD_REQUEST", "Name, email, username, and password are required.")
    if len(body.password) < PASSWORD_MIN_LENGTH:
        raise _bad_request(
            "PASSWORD_TOO_SHORT",
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters.",
        )

    if await store.find_by_email(body.email):
        raise _bad_request("EMAIL_EXISTS", "User already exists with this email.")
    if await store.find_by_username(body.username):
        raise _bad_request("USERNAME_EXISTS", "Username is already taken.")

    u = await store.create(
        name=body.name,
        email=body.email,
        username=body.username,
        password=body.password,
        role=body.role or Role.MEMBER,
    )
    logger.info("[users] %s created user id=%s role=%s", admin.email, u.id, u.role.value)
    return _user_to_dict(u)


@router.get(
    "/{user_id}",
    response_model=UserOut,
    dependencies=[Depends(require_admin)],
)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    """
    Get one user by id (admin only).

    Raises:
        HTTPException (404): If user not found
    """
    u = await store.get(user_id)
    if not u:
        raise _not_found()
    return _user_to_dict(u)


@router.put(
    "/{user_id}",
    response_model=UserOut,
    dependencies=[Depends(require_admin)],
)
async def update_user(user_id: str, body: UserUpdateIn, store: UserStore = Depends(get_user_store)):
    """
    Apply a partial edit to a user (admin only).

    Only the fields present in the body are changed. A changed email or
    username is not checked against other users here; if the database
    rejects it the request fails with a 500.

    Raises:
        HTTPException (400): BAD_REQUEST, PASSWORD_TOO_SHORT
        HTTPException (404): If user not found
    """
    if body.blank_fields():
        raise _bad_request("BAD_REQUEST", "Name, email, and username cannot be empty.")
    if body.password is not None and len(body.password) < PASSWORD_MIN_LENGTH:
        raise _bad_request(
            "PASSWORD_TOO_SHORT",
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters.",
        )
    u = await store.update(user_id, body.model_dump(exclude_unset=True))
    if not u:
        raise _not_found()
    return _user_to_dict(u)


@router.delete(
    "/{user_id}",
    response_model=UserDeactivatedOut,
    dependencies=[Depends(require_admin)],
)
async def deactivate_user(user_id: str, store: UserStore = Depends(get_user_store)):
    """
    Soft-delete a user (admin only): the status becomes deactivated and the
    row is kept. Deactivated users can no longer sign in.

    Raises:
        HTTPException (404): If user not found
    """
    u = await store.deactivate(user_id)
    if not u:
        raise _not_found()
    return {"message": "User deactivated successfully", "user": _user_to_dict(u)}
