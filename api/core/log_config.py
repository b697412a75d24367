"""
Process-wide logging setup.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Attach a stream handler to the root logger (once) and set its level.

    uvicorn configures its own loggers; this only covers the application's
    module loggers (`logging.getLogger(__name__)`).
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    name = (level or settings.log_level()).upper()
    root.setLevel(getattr(logging, name, logging.INFO))
