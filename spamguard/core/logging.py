import logging
import sys
from typing import Any

from loguru import logger

from spamguard.config import get_settings

# Probe endpoints whose access lines are only worth seeing while debugging
QUIET_PATHS = ("/health",)

# Libraries that log through stdlib logging
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "aiohttp.client")

DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | {extra}"
)
# Events are snake_case names, the bound context carries the details
EVENT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} | {message} | {extra}"


class InterceptHandler(logging.Handler):
    """Intercept stdlib logging and redirect to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module so loguru reports the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _quiet_paths_filter(record: dict[str, Any]) -> bool:
    """Drop access lines for QUIET_PATHS unless the record is DEBUG or lower."""
    message = record.get("message", "")
    if any(f" {path} " in message for path in QUIET_PATHS):
        return bool(record["level"].no <= logger.level("DEBUG").no)
    return True


def setup_logging() -> None:
    """Configure loguru for the API and CLI."""
    settings = get_settings()

    logger.remove()

    if settings.debug:
        logger.add(sys.stderr, level="DEBUG", format=DEBUG_FORMAT, diagnose=True)
    elif settings.log_json:
        logger.add(sys.stderr, level="INFO", serialize=True, filter=_quiet_paths_filter)
    else:
        logger.add(sys.stderr, level="INFO", format=EVENT_FORMAT, filter=_quiet_paths_filter)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in INTERCEPTED_LOGGERS:
        logging.getLogger(name).handlers = [InterceptHandler()]
        logging.getLogger(name).propagate = False


def get_logger(name: str) -> Any:
    """Get a logger bound to a name."""
    return logger.bind(name=name)
