"""
Logging configuration
"""
import logging
from typing import Optional

from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance with configured settings

    Args:
        name: Logger name (typically __name__)
        level: Optional level name overriding settings.LOG_LEVEL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    level_name = (level or settings.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (only when a log file is configured)
    if settings.LOG_FILE:
        settings.ensure_directories()
        file_handler = logging.FileHandler(settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
