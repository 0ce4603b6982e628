"""
Logging setup for the API process.

``setup_logging`` gives the root logger one console handler and, when
``LOG_FILE`` is set, a file handler, both using the same
``timestamp [LEVEL] logger: message`` layout.  A root logger that
already has handlers (uvicorn's, pytest's, or ours from an earlier
``create_app`` call) is left as it is.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        path = Path(logfile).resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach handlers to the root logger unless it has some already.

    ``level`` is a level name such as ``"DEBUG"`` or ``"info"``; unknown
    names fall back to ``INFO``.  ``logfile`` names a file to append
    records to, creating missing parent directories.  Returns True if
    handlers were attached.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return True
