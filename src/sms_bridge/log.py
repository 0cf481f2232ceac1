from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def _normalise_level(value: int | str | None) -> int:
    """Resolve a level from the argument, then SMS_BRIDGE_LOG_LEVEL, then INFO."""
    if value is None:
        value = os.getenv("SMS_BRIDGE_LOG_LEVEL")
        if not value:
            return logging.INFO
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    """Install the root logging config once per process."""
    global _configured
    if _configured:
        return
    logging.basicConfig(level=_normalise_level(level), format=LOG_FORMAT)
    _configured = True
