# ABOUTME: Logging configuration using loguru sinks with structlog events routed into them
# ABOUTME: Dual-mode operation: interactive CLI logs to files, production emits JSON on stderr

import logging
import os
import sys
from pathlib import Path
from typing import Any

import structlog
from loguru import logger

LOG_DIR = Path("logs")

# Loggers lowered to WARNING so they don't interleave with CLI output
THIRD_PARTY_LOGGERS = ["httpx", "httpcore", "asyncio", "urllib3"]

# Set by configure_logging so status reports what is actually in effect
_active_mode: str | None = None
_active_log_file: str | None = None


class LoggingMode:
    """Logging mode constants."""

    INTERACTIVE = "interactive"
    PRODUCTION = "production"


class LoguruLogger:
    """structlog logger that hands rendered events to the configured loguru sinks."""

    def __init__(self, name: str | None = None):
        self.name = name or "backloggd_snippet"

    def _log(self, level: str, message: str) -> None:
        logger.patch(lambda record: record.update(name=self.name)).log(level, message)

    def debug(self, message: str) -> None:
        self._log("DEBUG", message)

    def info(self, message: str) -> None:
        self._log("INFO", message)

    def warning(self, message: str) -> None:
        self._log("WARNING", message)

    def error(self, message: str) -> None:
        self._log("ERROR", message)

    def critical(self, message: str) -> None:
        self._log("CRITICAL", message)

    msg = info
    warn = warning
    exception = error
    fatal = critical


def detect_logging_mode() -> str:
    """Detect whether we're running in interactive or production mode."""
    mode = os.getenv("BACKLOGGD_SNIPPET_LOG_MODE")
    if mode and mode.lower() in [LoggingMode.INTERACTIVE, LoggingMode.PRODUCTION]:
        return mode.lower()

    return LoggingMode.INTERACTIVE if sys.stdout.isatty() else LoggingMode.PRODUCTION


def setup_third_party_logging() -> None:
    """Quiet third-party library logging so it doesn't interfere with the CLI."""
    for logger_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(logging.ERROR)


def setup_structlog() -> None:
    """Render structlog events as key=value lines and send them through loguru."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
        logger_factory=LoguruLogger,
        cache_logger_on_first_use=False,
    )


def _add_stream_sink(log_level: str) -> None:
    # stdout is reserved for command output (snippets, JSON records)
    logger.add(sys.stderr, level=log_level, format="{time} | {level} | {name} | {message}", serialize=True)


def configure_logging(mode: str | None = None, log_level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging using loguru.

    Args:
        mode: Logging mode (interactive/production), auto-detected if None
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Custom log file path, uses default if None
    """
    global _active_mode, _active_log_file

    if mode is None:
        mode = detect_logging_mode()

    setup_third_party_logging()
    setup_structlog()

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(numeric_level)

    logger.remove()

    if mode != LoggingMode.INTERACTIVE:
        _add_stream_sink(log_level)
        _active_mode, _active_log_file = LoggingMode.PRODUCTION, None
        return

    try:
        LOG_DIR.mkdir(exist_ok=True)
    except OSError:
        # No writable log directory: fall back to JSON on stderr
        _add_stream_sink(log_level)
        _active_mode, _active_log_file = LoggingMode.PRODUCTION, None
        return

    _active_mode = LoggingMode.INTERACTIVE
    _active_log_file = log_file or str(LOG_DIR / "backloggd-snippet.log")

    logger.add(
        _active_log_file,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}",
        rotation="10 MB",
        retention="7 days",
    )

    logger.add(
        LOG_DIR / "errors.log",
        level="ERROR",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name} - {message}",
        backtrace=True,
        diagnose=True,
    )


def get_logging_status() -> dict[str, Any]:
    """Get current logging configuration status.

    Reports the mode chosen by the last configure_logging call, falling back to
    detection when logging has not been configured yet.
    """
    mode = _active_mode or detect_logging_mode()
    interactive = mode == LoggingMode.INTERACTIVE

    return {
        "mode": mode,
        "log_directory": str(LOG_DIR.absolute()) if LOG_DIR.exists() else None,
        "log_files": {
            "main": (_active_log_file or str(LOG_DIR / "backloggd-snippet.log")) if interactive else None,
            "errors": str(LOG_DIR / "errors.log") if interactive else None,
        },
        "third_party_suppressed": list(THIRD_PARTY_LOGGERS),
    }
