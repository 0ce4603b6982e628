"""
Entity store selection.

The backend is chosen once, when the application starts, from
``settings.storage_backend``.  The service layer reaches the active
store through ``get_storage()`` the same way it reaches the database
through ``core.db.get_connection``.
"""

import logging
from typing import Optional

from ..core.config import Settings, settings as default_settings
from .base import Storage
from .memory import MemoryStorage
from .sqlite import SQLiteStorage


logger = logging.getLogger(__name__)

_storage: Optional[Storage] = None


def build_storage(config: Optional[Settings] = None) -> Storage:
    """Instantiate the store named by ``config.storage_backend``."""
    config = config or default_settings
    backend = config.storage_backend.lower()
    if backend == "memory":
        return MemoryStorage()
    if backend == "sqlite":
        return SQLiteStorage(config.database_url)
    raise ValueError(f"Unknown storage backend '{config.storage_backend}'; expected 'memory' or 'sqlite'")


def get_storage() -> Storage:
    """Return the process‑wide store, building it on first use."""
    global _storage
    if _storage is None:
        _storage = build_storage()
        logger.info("Initialised %s", type(_storage).__name__)
    return _storage


def set_storage(storage: Optional[Storage]) -> None:
    """Install ``storage`` as the process‑wide store (``None`` resets it)."""
    global _storage
    _storage = storage


__all__ = [
    "Storage",
    "MemoryStorage",
    "SQLiteStorage",
    "build_storage",
    "get_storage",
    "set_storage",
]
