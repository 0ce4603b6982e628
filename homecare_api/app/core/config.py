"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with a local SQLite file, permissive booking transitions
and demo data.
"""

import os
from dataclasses import dataclass
from typing import List, Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Home Healthcare Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Which entity store backs the API: ``memory`` or ``sqlite``.  The
    # choice is read once when the application starts.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "homecare.db")

    # ``permissive`` accepts any status change on a booking, ``strict``
    # only those listed in the lifecycle transition table.
    booking_transitions: str = os.getenv("BOOKING_TRANSITIONS", "permissive")

    # Populate an empty store with demo users, services and bookings.
    seed_data: bool = _env_flag("SEED_DATA", "true")

    # Satisfaction figure reported by the dashboard.  There is no survey
    # data behind it.
    satisfaction_score: float = float(os.getenv("SATISFACTION_SCORE", "4.8"))

    # Comma‑separated list of origins allowed by CORS.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def strict_transitions(self) -> bool:
        return self.booking_transitions.lower() == "strict"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
