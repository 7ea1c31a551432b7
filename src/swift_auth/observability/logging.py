"""Logging configuration using Loguru.

This module provides:
- Structured JSON logging for services embedding the client
- Human-readable colorized output for interactive use
- Interception of standard library logging (httpx, httpcore)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import orjson
from loguru import logger


if TYPE_CHECKING:
    from typing import Any


# Third-party loggers that are too chatty at INFO for an auth handshake
_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio")


class InterceptHandler(logging.Handler):
    """Redirect standard library log records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit a log record by forwarding to Loguru."""
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _format_record(record: dict[str, Any]) -> str:
    """Serialize a log record to a single JSON line."""
    fields: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["extra"].get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
        **{k: v for k, v in record["extra"].items() if k != "name"},
    }

    exc = record["exception"]
    if exc:
        fields["exception"] = {
            "type": exc.type.__name__ if exc.type else None,
            "value": str(exc.value) if exc.value else None,
        }

    # Loguru treats the returned string as a template, so braces are escaped
    line = orjson.dumps(fields, default=str).decode()
    return line.replace("{", "{{").replace("}", "}}") + "\n"


def _format_record_text(record: dict[str, Any]) -> str:
    """Human-readable format, extra fields appended as key=value."""
    extras = " ".join(
        f"{k}={v}" for k, v in record["extra"].items() if k != "name"
    )
    extras = extras.replace("{", "{{").replace("}", "}}")
    fmt = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[name]}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
    )
    if extras:
        fmt += f" | {extras}"
    fmt += "\n"
    if record["exception"]:
        fmt += "{exception}\n"
    return fmt


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure Loguru logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" or "text")
    """
    logger.remove()
    logger.configure(extra={"name": "swift_auth"})

    if log_format == "json":
        logger.add(
            sys.stderr,
            format=_format_record,
            level=log_level.upper(),
            colorize=False,
            backtrace=False,
            diagnose=False,  # frames may hold credentials
        )
    else:
        logger.add(
            sys.stderr,
            format=_format_record_text,
            level=log_level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for logger_name in _NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> "logger":  # type: ignore[valid-type]
    """Get a logger instance bound to a name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        A Loguru logger instance
    """
    return logger.bind(name=name)


__all__ = [
    "InterceptHandler",
    "get_logger",
    "logger",
    "setup_logging",
]
