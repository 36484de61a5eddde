import sys
from typing import Optional

from loguru import logger

from settings import settings


def setup_logging(level: Optional[str] = None, sink=None):
    logger.remove()
    fmt = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
    logger.add(sink or sys.stderr, format=fmt, colorize=True, level=level or settings.LOG_LEVEL)
    return logger
