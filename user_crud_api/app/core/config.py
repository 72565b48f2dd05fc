"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all.  Override them via
environment variables in a deployment.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User CRUD API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Comma‑separated names the store is seeded with on start‑up.  Ids are
    # assigned in the listed order starting from 1.
    seed_users: str = os.getenv("SEED_USERS", "VanVTT,TrungHN,HuyHM,ThaoDTD")

    # Cross‑origin headers attached to every response.
    cors_allow_origin: str = os.getenv("CORS_ALLOW_ORIGIN", "*")
    cors_allow_methods: str = os.getenv("CORS_ALLOW_METHODS", "POST, GET, PUT, OPTIONS, DELETE")
    cors_allow_headers: str = os.getenv("CORS_ALLOW_HEADERS", "*")
    cors_max_age: int = int(os.getenv("CORS_MAX_AGE", "3600"))

    @property
    def seed_user_names(self) -> List[str]:
        """Return the seed names with blanks and repeats removed.

        Names are unique in the store, so a repeated name keeps only its
        first position.
        """
        names = [name.strip() for name in self.seed_users.split(",") if name.strip()]
        return list(dict.fromkeys(names))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
