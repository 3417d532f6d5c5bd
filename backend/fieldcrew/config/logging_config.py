"""
Logging setup for scripts and services embedding fieldcrew.
"""
import logging
import sys
from typing import Optional

from fieldcrew.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a stdout handler on the root logger (replaces existing handlers)."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        handlers=[handler],
        force=True,
    )
