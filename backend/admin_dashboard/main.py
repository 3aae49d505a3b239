# admin_dashboard/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from admin_dashboard.api.v1.deps import get_database, get_user_store
from admin_dashboard.api.v1.routers import auth, pages, users
from admin_dashboard.config import Settings, settings
from admin_dashboard.core.bootstrap import ensure_default_admin
from admin_dashboard.core.db import Database
from admin_dashboard.core.errors import StoreError, store_error_handler

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    await db.init()
    # Ensure there's an admin account on first run
    await ensure_default_admin(get_user_store(db), app.state.settings)
    logger.info("[startup] %s ready (env=%s)", app.title, app.state.settings.env)
    try:
        yield
    finally:
        await db.close()


def create_app(db: Optional[Database] = None, cfg: Settings = settings) -> FastAPI:
    """
    Build the application around a database handle.

    The handle is created here (or passed in by tests), opened by the
    lifespan and reached by handlers through the ``get_database`` dependency.
    """
    app = FastAPI(title=cfg.APP_NAME, lifespan=lifespan)
    app.state.settings = cfg
    app.state.db = db or Database(cfg.database_url, generate_schemas=cfg.generate_schemas)

    # CORS (with Cookie)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)

    # REST
    app.include_router(auth.router, prefix="/api/v1")
    app.include_router(users.router, prefix="/api/v1")

    # HTML
    app.include_router(pages.router)

    @app.get("/healthz")
    async def healthz(request: Request):
        return {"ok": True, "db": await get_database(request).ping()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("admin_dashboard.main:app", host=settings.host, port=settings.port)
