import sys
from typing import Any

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO", sink: Any = None, fmt: str = DEFAULT_FORMAT) -> int:
    """Replace loguru's default sink. Returns the id of the new handler."""
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper(), format=fmt)
