"""Logging configuration and utilities."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger

from config import Settings, settings

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class InterceptHandler(logging.Handler):
    """Redirects standard logging into Loguru while preserving correct caller info."""

    def emit(self, record: logging.LogRecord) -> None:
        """Log the specified logging record."""
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        _base_logger().opt(depth=depth, exception=record.exc_info).log(
            level,
            record.getMessage(),
        )


def setup_logger(config: Settings | None = None) -> None:
    """Configure Loguru for console and, optionally, file logging.

    Features:
    - Human-friendly console logs
    - Structured JSON file logs when `log_to_file` is enabled
    - Full interception of stdlib logging (uvicorn included)
    """
    config = config or settings
    logger.remove()

    def _patcher(record):
        record["extra"].setdefault("request_id", request_id_ctx.get())

    # Ensure request_id always exists to prevent KeyErrors in format string
    logger.configure(patcher=_patcher)

    logger.add(
        sys.stderr,
        level=config.log_level,
        colorize=True,
        backtrace=True,
        diagnose=False,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level:<8}</level> | "
            "req=<cyan>{extra[request_id]}</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )

    if config.log_to_file:
        log_dir = config.log_dir
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_dir / "server.log"),
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
            compression="zip",
            serialize=True,
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )

    logging.basicConfig(
        handlers=[InterceptHandler()],
        level=0,
        force=True,
    )

    for noisy in (
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "asyncio",
    ):
        _logger = logging.getLogger(noisy)
        _logger.handlers = [InterceptHandler()]
        _logger.propagate = False


def bind_request(request_id: str) -> None:
    """Bind the current request id (used by the HTTP middleware)."""
    request_id_ctx.set(request_id)


def clear_request() -> None:
    """Clear the request context."""
    request_id_ctx.set(None)


def _base_logger(extra: dict[str, Any] | None = None):
    return logger.bind(request_id=request_id_ctx.get(), **(extra or {}))


def log(message: str, level: str = "INFO", **kwargs: Any) -> None:
    """Log a message with structured fields.

    Usage:
        log("Serving range", start=0, end=499)
        log("Read failed", level="ERROR", error=str(exc))
    """
    _base_logger(kwargs).log(level.upper(), message)


def _handle_uncaught(exc_type, exc, tb):
    logger.bind(request_id=request_id_ctx.get()).opt(
        exception=(exc_type, exc, tb)
    ).critical("Unhandled exception")


sys.excepthook = _handle_uncaught

setup_logger()


def get_logger(name: str | None = None):
    """Get a logger instance (optionally bound to a name)."""
    return logger.bind(name=name)
