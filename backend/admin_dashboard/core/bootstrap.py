# admin_dashboard/core/bootstrap.py
"""
Bootstrap module for application initialization.
Creates the seed admin account on first startup.
"""
import logging

from admin_dashboard.config import Settings
from admin_dashboard.models.user import Role
from admin_dashboard.services.user_store import UserStore

logger = logging.getLogger("uvicorn.error")


async def ensure_default_admin(store: UserStore, cfg: Settings) -> None:
    """
    If no admin exists in the database, create one from the configuration.
    Only takes effect under the following conditions:
      - Currently no user with role="admin"
      - And ADMIN_PASSWORD is set (to avoid using default weak password)
    Environment variables:
      ADMIN_NAME     (default: "Administrator")
      ADMIN_USERNAME (default: "admin")
      ADMIN_EMAIL    (default: "admin@example.com")
      ADMIN_PASSWORD (required, otherwise won't create)
    """
    if await store.has_admin():
        return

    if not cfg.admin_password:
        logger.warning("[bootstrap] No admin present, but ADMIN_PASSWORD not set -> skip creating default admin.")
        return

    if await store.find_by_email(cfg.admin_email):
        logger.warning("[bootstrap] %s already belongs to a non-admin account -> skip creating default admin.",
                       cfg.admin_email)
        return

    # If username is already taken by a member, create a non-conflicting name
    admin_username = cfg.admin_username
    suffix = 1
    while await store.find_by_username(admin_username):
        suffix += 1
        admin_username = f"{cfg.admin_username}{suffix}"

    u = await store.create(
        name=cfg.admin_name,
        email=cfg.admin_email,
        username=admin_username,
        password=cfg.admin_password,
        role=Role.ADMIN,
    )
    logger.warning("[bootstrap] Created default admin -> username=%s email=%s id=%s",
                   u.username, u.email, u.id)
