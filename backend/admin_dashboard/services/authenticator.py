# admin_dashboard/services/authenticator.py
"""
Credential verification for the sign-in endpoint.
"""
from __future__ import annotations

import logging
from typing import Optional

from admin_dashboard.core.security import verify_password
from admin_dashboard.schemas.auth import SessionClaims
from admin_dashboard.services.user_store import UserStore

logger = logging.getLogger("uvicorn.error")


async def authenticate(
    store: UserStore, email: Optional[str], password: Optional[str]
) -> Optional[SessionClaims]:
    """
    Check an email/password pair and return the session claims on success.

    Every failure (unknown email, deactivated account, wrong password, empty
    input) returns None so callers cannot tell the reasons apart. The hash is
    verified before the status check to keep the work done per attempt the same.
    """
    if not email or not password:
        return None

    user = await store.find_by_email(email)
    if user is None:
        logger.info("[auth] login failed: unknown email")
        return None

    if not verify_password(password, user.password_hash) or not user.is_active:
        logger.info("[auth] login failed for user id=%s", user.id)
        return None

    await store.touch_last_login(user)
    return SessionClaims(id=str(user.id), name=user.name, email=user.email, role=user.role)
