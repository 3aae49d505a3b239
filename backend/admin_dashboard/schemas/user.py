# admin_dashboard/schemas/user.py
"""
Pydantic schemas for the user directory endpoints.
Defines request/response models for listing, creating, editing and deactivating users.
"""
from typing import List, Optional

from pydantic import BaseModel, field_validator

from admin_dashboard.models.user import Role, Status

PASSWORD_MIN_LENGTH = 6


def _fold_role(v):
    # "Admin" / "MEMBER" are accepted and stored lower-case
    return v.strip().lower() if isinstance(v, str) else v


# ========== Common return model ==========
class UserOut(BaseModel):
    """
    User record returned by every directory endpoint.
    The password hash is never part of it.
    """
    id: str
    name: str
    email: str
    username: str
    role: Role
    status: Status
    createdAt: Optional[str] = None  # ISO-8601, UTC
    updatedAt: Optional[str] = None
    lastLogin: Optional[str] = None


class UserDeactivatedOut(BaseModel):
    """Response of the soft-delete endpoint."""
    message: str
    user: UserOut


class UserStatsOut(BaseModel):
    """Counters shown on the admin dashboard cards."""
    total: int
    active: int
    deactivated: int
    admins: int
    new_signups: int  # Created in the last 30 days


# ========== Input models ==========
class UserCreateIn(BaseModel):
    """
    Request model for creating a user.
    Required fields are optional here so that a missing one is reported as a 400
    with a readable message instead of a schema error.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None  # Defaults to member when missing or null

    @field_validator("role", mode="before")
    @classmethod
    def fold_role(cls, v):
        return _fold_role(v)

    def missing_fields(self) -> List[str]:
        return [
            f for f in ("name", "email", "username", "password")
            if not (getattr(self, f) or "").strip()
        ]


class UserUpdateIn(BaseModel):
    """
    Request model for editing a user.
    All fields are optional - only provided fields will be updated.
    Status is not editable here; deactivation has its own endpoint.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    role: Optional[Role] = None
    password: Optional[str] = None  # Re-hashed before saving

    @field_validator("role", mode="before")
    @classmethod
    def fold_role(cls, v):
        return _fold_role(v)

    def blank_fields(self) -> List[str]:
        """Identity fields sent as empty or whitespace-only strings."""
        return [
            f for f in ("name", "email", "username")
            if getattr(self, f) is not None and not getattr(self, f).strip()
        ]
