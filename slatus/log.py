"""Package logger.

Every module logs through ``from .log import logger``.  Nothing is emitted
until :func:`configure_logging` attaches a handler (the CLI does this for
``--verbose`` or a ``logging.level`` preference).
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("slatus")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stderr handler at *level* (replacing any earlier one)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    for old in [h for h in logger.handlers if getattr(h, "_slatus", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler.setLevel(level)
    handler._slatus = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
