import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

from . import settings

CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: Optional[str] = None, log_level: Union[int, str, None] = None
) -> logging.Logger:
    """
    Configures console and rotating-file logging for the entry scripts.
    The level defaults to settings.LOG_LEVEL; the file lives at
    LOG_DIR/LOG_FILENAME and rotates at LOG_MAX_BYTES, keeping LOG_BACKUP_COUNT copies.
    Calling it again for a configured logger returns it unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = settings.LOG_LEVEL if log_level is None else log_level
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        settings.LOG_DIR / settings.LOG_FILENAME,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    logger.addHandler(file_handler)

    return logger
