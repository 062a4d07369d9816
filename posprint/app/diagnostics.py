from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "POSPRINT_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send log records to stderr.

    The level is INFO, DEBUG with ``verbose``, and POSPRINT_LOG_LEVEL wins
    over both when it names a valid level.
    """
    level = logging.DEBUG if verbose else logging.INFO
    override = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if override and isinstance(logging.getLevelName(override), int):
        level = logging.getLevelName(override)

    root = logging.getLogger()
    root.setLevel(level)
    # repeated calls must not stack handlers
    root.handlers = []
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
