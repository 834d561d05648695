"""Logging configuration for ToolScout."""

import logging
import sys

from toolscout.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Outbound HTTP and SDK loggers are only useful at WARNING and above
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "uvicorn.access")


def setup_logging() -> None:
    """Configure application logging; DEBUG=true overrides LOG_LEVEL."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    if not root.handlers:
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("toolscout").debug(
        f"Logging configured at {logging.getLevelName(level)}"
    )
