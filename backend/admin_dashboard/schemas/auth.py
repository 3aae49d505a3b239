# admin_dashboard/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines the login request, the session claims carried in the token and the login response.
"""
from typing import Optional

from pydantic import BaseModel, field_validator

from admin_dashboard.models.user import Role


class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Empty values are accepted here and rejected by the authenticator with the generic error.
    """
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: Optional[str]) -> Optional[str]:
        return v.strip() if v is not None else v


class SessionClaims(BaseModel):
    """
    Identity and role of the signed-in user.
    Issued at login, embedded in the token and rebuilt from it on every request.
    """
    id: str
    name: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_token_payload(cls, payload: dict) -> "SessionClaims":
        """Rebuild claims from a decoded token; raises ``ValidationError`` on an unknown role."""
        return cls(
            id=payload["sub"],
            name=payload.get("name", ""),
            email=payload.get("email", ""),
            role=payload["role"],
        )


class LoginResponse(BaseModel):
    """
    Response model for successful login.
    Returns the session claims and the token for clients that prefer the Authorization header.
    """
    user: SessionClaims
    accessToken: str
