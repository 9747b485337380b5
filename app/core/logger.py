import sys
from loguru import logger
import logging

from app.core.config import settings

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"

class InterceptHandler(logging.Handler):
    """Sends stdlib records (uvicorn, config_loader, db_service) to loguru."""

    def emit(self, record):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())

def setup_logging(level: str = None, error_log: str = "logs/errors.log"):
    logger.remove()
    logger.add(sys.stdout, level=level or settings.LOG_LEVEL, format=CONSOLE_FORMAT)

    # Store failures and unhandled errors
    logger.add(error_log, level="ERROR", rotation="10 MB", retention="1 month", compression="zip")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    # Request lines and the Supabase HTTP client
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

__all__ = ["logger", "setup_logging"]
