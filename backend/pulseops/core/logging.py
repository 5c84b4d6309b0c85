"""Logging setup for the API server"""
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once.

    Args:
        level: log level name, defaults to settings.LOG_LEVEL
    """
    global _configured
    if _configured:
        return

    if level is None:
        from pulseops.core.config import settings
        level = settings.LOG_LEVEL

    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
    # SQL statements are controlled by SQL_ECHO, keep the engine logger quiet otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
