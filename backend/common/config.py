"""
Runtime configuration.

Values come from the environment, with a local .env file loaded first so
development does not need exported variables.
"""

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:3000"


def _require(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise RuntimeError(f"{name} is not set. Please set it in .env")
    return value


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str
    token_expiration_minutes: int = 1440  # 24 hours
    db_pool_min: int = 1
    db_pool_max: int = 5
    cors_origins: List[str] = field(
        default_factory=lambda: DEFAULT_CORS_ORIGINS.split(",")
    )
    port: int = 4000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Raises:
            RuntimeError: If DATABASE_URL or JWT_SECRET is missing, or a
                numeric variable cannot be parsed.
        """
        load_dotenv()

        origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

        return cls(
            database_url=_require("DATABASE_URL"),
            jwt_secret=_require("JWT_SECRET"),
            token_expiration_minutes=_env_int("TOKEN_EXPIRATION_MINUTES", 1440),
            db_pool_min=_env_int("DB_POOL_MIN", 1),
            db_pool_max=_env_int("DB_POOL_MAX", 5),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            port=_env_int("PORT", 4000),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        )

    def to_flask_config(self) -> Dict[str, Any]:
        """Keys copied into app.config by the application factory."""
        return {
            "JWT_SECRET": self.jwt_secret,
            "TOKEN_EXPIRATION_MINUTES": self.token_expiration_minutes,
            "CORS_ORIGINS": list(self.cors_origins),
        }
