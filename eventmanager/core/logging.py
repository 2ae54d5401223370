import sys
from loguru import logger
import os
from typing import Optional

from .config import LoggingSettings

def setup_logging(settings: Optional[LoggingSettings] = None):
    """
    Configures Loguru logger.
    """
    settings = settings or LoggingSettings()

    # Remove default handler
    logger.remove()

    # Console Handler
    level = "DEBUG" if settings.debug_mode else "INFO"
    logger.add(sys.stderr, level=level, format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>")

    # File Handler
    if settings.log_to_file:
        if not os.path.exists(settings.log_dir):
            os.makedirs(settings.log_dir)

        logger.add(os.path.join(settings.log_dir, "eventmanager_{time}.log"), rotation="10 MB", retention="1 week", level="DEBUG")

    logger.debug("Logging initialized.")
