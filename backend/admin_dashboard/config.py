# admin_dashboard/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "User Admin Dashboard"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for a separately hosted frontend (comma-separated in .env)
    CORS_ORIGINS: list[str] = [
        o.strip()
        for o in os.getenv(
            "CORS_ORIGINS",
            "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000,http://127.0.0.1:8000",
        ).split(",")
        if o.strip()
    ]

    # Database (Tortoise URL). SQLite by default so the app runs without a server.
    database_url: str = os.getenv("DATABASE_URL", "sqlite://db.sqlite3")
    # Create tables on startup; turn off once Aerich migrations manage the schema
    generate_schemas: bool = _env_flag("GENERATE_SCHEMAS", "true")

    # Session token
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    cookie_secure: bool = _env_flag("COOKIE_SECURE")

    # Seed admin, only created when no admin exists and ADMIN_PASSWORD is set
    admin_name: str = os.getenv("ADMIN_NAME", "Administrator")
    admin_username: str = os.getenv("ADMIN_USERNAME", "admin")
    admin_email: str = os.getenv("ADMIN_EMAIL", "admin@example.com")
    admin_password: str | None = os.getenv("ADMIN_PASSWORD")

    # Interval used by the admin dashboard to refresh the user table
    poll_interval_ms: int = int(os.getenv("POLL_INTERVAL_MS", "5000"))


settings = Settings()  # Instantiate configuration
