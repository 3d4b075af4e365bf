import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./pawmate.db"
DEFAULT_JWT_SECRET_KEY = "change-me"


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseModel):
    """Process-wide configuration, built once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    app_env: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000

    database_url: str = DEFAULT_DATABASE_URL
    database_url_defaulted: bool = True

    jwt_secret_key: str = DEFAULT_JWT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60 * 24

    bcrypt_rounds: int = 10
    cors_origins: tuple[str, ...] = ("http://localhost:5173",)
    sql_echo: bool = False

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"


def load_settings() -> Settings:
    load_dotenv()
    database_url = os.getenv("DATABASE_URL")

    return Settings(
        app_env=os.getenv("APP_ENV", "development"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        database_url=database_url or DEFAULT_DATABASE_URL,
        database_url_defaulted=not database_url,
        jwt_secret_key=os.getenv("JWT_SECRET_KEY", DEFAULT_JWT_SECRET_KEY),
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", str(60 * 24))),
        bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
        cors_origins=tuple(_get_list(os.getenv("CORS_ORIGINS"), ["http://localhost:5173"])),
        sql_echo=_get_bool(os.getenv("SQL_ECHO"), default=False),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()


def validate_runtime_config(settings: Settings) -> None:
    if settings.is_production and settings.jwt_secret_key == DEFAULT_JWT_SECRET_KEY:
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")

    if settings.database_url_defaulted and not settings.is_development:
        logger.warning(
            "DATABASE_URL is not set; falling back to %s. Check the deployment environment variables.",
            DEFAULT_DATABASE_URL,
        )


def redact_database_url(url: str) -> str:
    scheme, separator, rest = url.partition("://")
    if not separator or "@" not in rest:
        return url
    return f"{scheme}://****:****@{rest.split('@', 1)[1]}"
