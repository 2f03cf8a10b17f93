"""Central logging configuration for the backup catalog client.

Callers (a CLI entrypoint, a notebook, a test harness) invoke `setup_logging`
once before talking to the platform.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """Initialize client logging.

    - Level is taken from the loaded settings (`LOG_LEVEL`) if not provided.
    - Uses a concise, structured-ish format with timestamps.
    """

    log_level = (level or get_settings().log_level).upper()

    root_logger = logging.getLogger()

    # Configure handlers once to avoid duplicates on repeated calls
    if not root_logger.handlers:
        logging.basicConfig(
            level=log_level,
            format=(
                "%(asctime)s | %(levelname)s | %(name)s | "
                "%(message)s"
            ),
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger.setLevel(log_level)

    # httpx logs every request line (signed URLs included) at INFO; only show it when debugging
    transport_level = logging.DEBUG if root_logger.level == logging.DEBUG else logging.WARNING
    logging.getLogger("httpx").setLevel(transport_level)
    logging.getLogger("httpcore").setLevel(transport_level)
