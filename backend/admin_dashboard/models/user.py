# admin_dashboard/models/user.py
"""
Database model for users.
Represents an account of the dashboard: identity, hashed credential,
role-based access level and the soft-delete status.
"""
import uuid
from enum import Enum

from tortoise import fields, models


class Role(str, Enum):
    """Access level of an account. Shared by the model, the schemas and the token claims."""

    ADMIN = "admin"
    MEMBER = "member"


class Status(str, Enum):
    """Account status. ``deactivated`` is terminal: nothing moves a user back to active."""

    ACTIVE = "active"
    DEACTIVATED = "deactivated"


class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email and username are unique; email is stored lower-cased
    - Deleting a user only flips ``status`` to deactivated, rows are never removed
    """
    id = fields.UUIDField(primary_key=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=256)  # Display name (trimmed before saving)
    email = fields.CharField(max_length=256, unique=True, db_index=True)  # Lower-cased login email
    username = fields.CharField(max_length=256, unique=True, db_index=True)  # Public handle
    password_hash = fields.CharField(max_length=255)  # argon2 hash, never the plain text
    role = fields.CharEnumField(Role, max_length=16, default=Role.MEMBER)
    status = fields.CharEnumField(Status, max_length=16, default=Status.ACTIVE)
    last_login = fields.DatetimeField(null=True)  # Set by the authenticator on successful sign-in
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"

    @property
    def is_active(self) -> bool:
        return self.status == Status.ACTIVE

    def __str__(self) -> str:
        return f"{self.username} <{self.email}>"
