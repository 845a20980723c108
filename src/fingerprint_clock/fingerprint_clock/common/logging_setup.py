from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# status messages and scripts log under "fingerprint_clock"; modules under their import path
LOGGER_NAMES = tuple(dict.fromkeys(("fingerprint_clock", __name__.rsplit(".", 2)[0])))

_handler: Optional[logging.Handler] = None


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach one console handler to the package loggers.

    Safe to call more than once (e.g. one Flask app per test).
    """

    global _handler
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    _handler.setLevel(level)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if _handler not in logger.handlers:
            logger.addHandler(_handler)
    return logging.getLogger(LOGGER_NAMES[0])
