"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any setup on a developer machine.  In a production
deployment you should at least override ``SECRET_KEY``.
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pokemon Adoption API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Session tokens are signed with this key and expire after one hour
    # unless ACCESS_TOKEN_EXPIRE_MINUTES says otherwise.
    secret_key: str = os.getenv("SECRET_KEY", "change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # Path to the SQLite database.  A relative path is resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "pokemon_adoption.db")

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows
    # the browser client to be served from anywhere.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # When enabled, only the owner of a Pokémon may feed it.
    enforce_feed_ownership: bool = _env_bool("ENFORCE_FEED_OWNERSHIP", "true")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
