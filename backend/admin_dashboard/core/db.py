# admin_dashboard/core/db.py
"""
Database configuration and lifecycle.
Builds the Tortoise ORM configuration and provides the ``Database`` handle that
the application creates once at startup and closes at shutdown.
"""
import logging

from tortoise import Tortoise, connections

from admin_dashboard.config import settings

logger = logging.getLogger("uvicorn.error")

MODEL_MODULES = [
    "admin_dashboard.models.user",  # User model
    "aerich.models",                # Required: Let Aerich manage migration tables
]


def build_tortoise_config(db_url: str) -> dict:
    """
    Build the Tortoise ORM configuration dictionary for ``db_url``.

    Timestamps are stored timezone-aware in UTC.
    """
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": list(MODEL_MODULES),
                "default_connection": "default",
            },
        },
        "use_tz": True,
        "timezone": "UTC",
    }


# Module-level config is only consumed by Aerich (see pyproject.toml [tool.aerich])
TORTOISE_ORM = build_tortoise_config(settings.database_url)


class Database:
    """
    Handle on the ORM connection pool.

    Created explicitly by the application factory and stored on ``app.state``;
    request handlers reach it through ``get_database`` rather than through a
    module global.
    """

    def __init__(self, db_url: str, generate_schemas: bool = False):
        self.db_url = db_url
        self.generate_schemas = generate_schemas
        self.config = build_tortoise_config(db_url)
        self._ready = False

    @property
    def ready(self) -> bool:
        return self._ready

    async def init(self) -> None:
        """
        Open the connection and register models.

        ``generate_schemas`` is meant for development and tests; use Aerich
        migrations in production.
        """
        await Tortoise.init(config=self.config)
        if self.generate_schemas:
            await Tortoise.generate_schemas(safe=True)
        self._ready = True
        logger.info("[db] connected to %s", self.db_url.split("@")[-1])

    async def close(self) -> None:
        """Close all database connections."""
        if not self._ready:
            return
        await connections.close_all()
        self._ready = False
        logger.info("[db] connections closed")

    async def ping(self) -> bool:
        """Run a trivial query; used by the health endpoint."""
        if not self._ready:
            return False
        try:
            await connections.get("default").execute_query("SELECT 1")
        except Exception as exc:
            logger.warning("[db] ping failed: %s", exc)
            return False
        return True
