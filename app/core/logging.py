"""
Loguru setup for the playlist analyzer.

Records emitted through the standard ``logging`` module (uvicorn, the Google
API client) are forwarded to Loguru so every line shares one format and
carries the request id bound by the HTTP middleware.
"""
import logging
import sys
from typing import Any

from loguru import logger

from app.core.config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[request_id]} | {name}:{function}:{line} - {message}"
)

FORWARDED_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")

# Noisy at INFO: one line per discovery lookup and per request
QUIET_LOGGERS = ("googleapiclient", "googleapiclient.discovery_cache")


class InterceptHandler(logging.Handler):
    """Forward standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames inside the logging module so Loguru reports the real caller
        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _forward_stdlib_logging() -> None:
    logging.root.handlers = []
    logging.basicConfig(handlers=[InterceptHandler()], level=0)

    for name in FORWARDED_LOGGERS:
        forwarded = logging.getLogger(name)
        forwarded.handlers = [InterceptHandler()]
        forwarded.propagate = False

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _default_request_id(record: dict[str, Any]) -> None:
    # Startup and background lines are logged outside any request
    record["extra"].setdefault("request_id", "N/A")


def setup_logging() -> None:
    """
    Route all application logging through Loguru.

    Writes to stderr at ``LOG_LEVEL`` and, when ``LOG_FILE`` is set, to a
    rotating, compressed log file as well.
    """
    _forward_stdlib_logging()

    logger.remove()
    logger.configure(patcher=_default_request_id)
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=settings.LOG_LEVEL)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=FILE_FORMAT,
            level=settings.LOG_LEVEL,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            enqueue=True,
        )
