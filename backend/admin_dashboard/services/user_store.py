# admin_dashboard/services/user_store.py
"""
Credential store: the only code that reads or writes ``User`` rows.

Routers never touch the model directly; they receive a ``UserStore`` through
the ``get_user_store`` dependency, which is bound to the ``Database`` handle
created at startup.
"""
from __future__ import annotations

import datetime as dt
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from tortoise.exceptions import BaseORMException

from admin_dashboard.core.db import Database
from admin_dashboard.core.errors import StoreError
from admin_dashboard.core.security import hash_password
from admin_dashboard.models.user import Role, Status, User

logger = logging.getLogger("uvicorn.error")

# Fields an admin edit may change; anything else in the payload is ignored
EDITABLE_FIELDS = ("name", "email", "username", "role", "password")

# Window for the "new signups" dashboard counter
NEW_SIGNUP_DAYS = 30


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively, so they are stored lower-cased."""
    return email.strip().lower()


def utc_now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Re-raise ORM/driver failures as ``StoreError`` keeping the original message."""
    try:
        yield
    except BaseORMException as exc:
        logger.error("[store] %s failed: %s", operation, exc)
        raise StoreError(str(exc)) from exc


def _parse_id(user_id: str | uuid.UUID) -> Optional[uuid.UUID]:
    if isinstance(user_id, uuid.UUID):
        return user_id
    try:
        return uuid.UUID(str(user_id))
    except ValueError:
        return None


class UserStore:
    """Repository over the ``users`` table."""

    def __init__(self, db: Database):
        self.db = db

    # ---------------- reads ----------------
    async def list_users(self) -> list[User]:
        """All users, newest first. Deactivated users are included."""
        with _store_errors("list"):
            return await User.all().order_by("-created_at")

    async def count_by_status(self) -> dict[str, int]:
        """Dashboard counters; ``new_signups`` covers the last ``NEW_SIGNUP_DAYS`` days."""
        cutoff = utc_now() - dt.timedelta(days=NEW_SIGNUP_DAYS)
        with _store_errors("count"):
            total = await User.all().count()
            active = await User.filter(status=Status.ACTIVE).count()
            admins = await User.filter(role=Role.ADMIN).count()
            new_signups = await User.filter(created_at__gte=cutoff).count()
        return {
            "total": total,
            "active": active,
            "deactivated": total - active,
            "admins": admins,
            "new_signups": new_signups,
        }

    async def get(self, user_id: str | uuid.UUID) -> Optional[User]:
        pk = _parse_id(user_id)
        if pk is None:
            return None
        with _store_errors("get"):
            return await User.get_or_none(id=pk)

    async def find_by_email(self, email: str) -> Optional[User]:
        with _store_errors("find_by_email"):
            return await User.get_or_none(email=normalize_email(email))

    async def find_by_username(self, username: str) -> Optional[User]:
        with _store_errors("find_by_username"):
            return await User.get_or_none(username=username.strip())

    async def has_admin(self) -> bool:
        with _store_errors("has_admin"):
            return await User.filter(role=Role.ADMIN).exists()

    # ---------------- writes ----------------
    async def create(
        self,
        *,
        name: str,
        email: str,
        username: str,
        password: str,
        role: Role = Role.MEMBER,
    ) -> User:
        """Persist a new active user. The password is hashed here, before the insert."""
        with _store_errors("create"):
            return await User.create(
                name=name.strip(),
                email=normalize_email(email),
                username=username.strip(),
                password_hash=hash_password(password),
                role=Role(role),
                status=Status.ACTIVE,
            )

    async def update(self, user_id: str | uuid.UUID, changes: dict[str, Any]) -> Optional[User]:
        """
        Apply a partial edit and return the updated user, or None if the id is unknown.

        Only keys from ``EDITABLE_FIELDS`` with a non-None value are applied.
        Uniqueness of a changed email/username is left to the database.
        """
        user = await self.get(user_id)
        if user is None:
            return None

        values: dict[str, Any] = {}
        for key in EDITABLE_FIELDS:
            value = changes.get(key)
            if value is None:
                continue
            if key == "password":
                values["password_hash"] = hash_password(value)
            elif key == "email":
                values["email"] = normalize_email(value)
            elif key == "role":
                values["role"] = Role(value)
            else:
                values[key] = value.strip()

        if values:
            with _store_errors("update"):
                user.update_from_dict(values)
                await user.save()
        return user

    async def deactivate(self, user_id: str | uuid.UUID) -> Optional[User]:
        """Soft-delete: flip status to deactivated. Already deactivated users are saved again as-is."""
        user = await self.get(user_id)
        if user is None:
            return None
        with _store_errors("deactivate"):
            user.status = Status.DEACTIVATED
            await user.save(update_fields=["status", "updated_at"])
        logger.info("[store] user deactivated id=%s email=%s", user.id, user.email)
        return user

    async def touch_last_login(self, user: User) -> None:
        with _store_errors("touch_last_login"):
            user.last_login = utc_now()
            await user.save(update_fields=["last_login"])
