"""
Bookstore logging setup

Every module logs through ``logging.getLogger(__name__)``. This function
installs a single stream handler on the root logger; call it once from
whatever process hosts the core.
"""
from __future__ import annotations
from typing import Optional
import logging
import os


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "bookstore"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure root logging from ``level`` or the LOG_LEVEL env var."""
    resolved = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(resolved)
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        root.addHandler(handler)

    return root
