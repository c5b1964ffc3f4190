"""Centralized logging configuration and control.

This module provides centralized logging configuration for the client:
1. stash_logger - For Stash client operations (console + rotating file)
2. InterceptHandler - Redirects stdlib logging of gql/httpx into loguru

Other modules should import and use these loggers rather than
creating their own handlers.
"""

import inspect
import logging
import sys
from pathlib import Path

from loguru import logger

# Global configuration
_config = None
_debug_enabled = False

# Log file names
DEFAULT_STASH_LOG_FILE = "stash.log"

# Third-party loggers that are routed through loguru
HTTP_LOGGERS = ("gql", "httpx", "httpcore")


class InterceptHandler(logging.Handler):
    """Intercepts standard logging and redirects to loguru.

    gql and httpx log through the standard library. This handler
    captures those records and re-emits them on the stash logger so
    they land in the same sinks.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        stash_logger.bind(name=record.name).opt(
            depth=depth, exception=record.exc_info
        ).log(level, record.getMessage())


# Standard level values (loguru's default scale)
_LEVEL_VALUES = {
    "TRACE": 5,  # Detailed information for diagnostics
    "DEBUG": 10,  # Debug information
    "INFO": 20,  # Normal information
    "SUCCESS": 25,  # Successful operation
    "WARNING": 30,  # Warning messages
    "ERROR": 40,  # Error messages
    "CRITICAL": 50,  # Critical errors
}

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# Remove default handler
logger.remove()

# Pre-configured logger with extra fields
stash_logger = logger.bind(stash=True)

# Handler IDs for cleanup
_handler_ids: list[int] = []


def _is_stash_record(record) -> bool:
    return record["extra"].get("stash", False)


def setup_handlers() -> None:
    """Set up all logging handlers.

    1. Stash console handler - colorized, on stderr
    2. Stash file handler - rotated and compressed by loguru
    3. Intercept handler for gql/httpx stdlib loggers
    """
    global _handler_ids

    # Remove any existing handlers
    for handler_id in _handler_ids:
        try:
            logger.remove(handler_id)
        except ValueError:
            pass  # Handler already removed
    _handler_ids = []

    # 1. Stash Console Handler
    _handler_ids.append(
        logger.add(
            sys.stderr,
            format="<level>{level.name}</level>: {message}",
            level=get_log_level("stash_console", "INFO"),
            colorize=True,
            filter=_is_stash_record,
        )
    )

    # 2. Stash File Handler
    log_dir = get_log_dir()
    log_dir.mkdir(parents=True, exist_ok=True)
    _handler_ids.append(
        logger.add(
            str(log_dir / DEFAULT_STASH_LOG_FILE),
            format="[{time:YYYY-MM-DD HH:mm:ss}] {level.name} - {name} - {message}",
            level=get_log_level("stash_file", "INFO"),
            filter=_is_stash_record,
            rotation="100 MB",
            retention=10,
            compression="gz",
            encoding="utf-8",
            enqueue=True,
        )
    )

    # 3. Route gql/httpx logging through loguru
    http_level = get_log_level("http", "WARNING")
    for name in HTTP_LOGGERS:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.setLevel(http_level)
        std_logger.propagate = False


def get_log_dir() -> Path:
    """Directory for log files, taken from the config when present."""
    if _config is not None and getattr(_config, "log_dir", None) is not None:
        return Path(_config.log_dir)
    return Path.cwd() / "logs"


def init_logging_config(config) -> None:
    """Initialize logging configuration."""
    global _config
    _config = config

    setup_handlers()


def set_debug_enabled(enabled: bool) -> None:
    """Set the global debug flag."""
    global _debug_enabled
    _debug_enabled = enabled


def get_log_level(logger_name: str, default: str = "INFO") -> int:
    """Get log level for a logger.

    Args:
        logger_name: Name of the logger (e.g., "stash_console", "http")
        default: Default level if config not set or logger not found

    Returns:
        Log level as integer (e.g., 10 for DEBUG, 20 for INFO)
            - 10 (DEBUG) if debug mode is enabled
            - Level from config or default, but never below DEBUG
    """
    if _debug_enabled:
        return _LEVEL_VALUES["DEBUG"]

    if _config is None:
        level_name = default
    else:
        level_name = _config.log_levels.get(logger_name, default)

    level = _LEVEL_VALUES.get(level_name.upper(), _LEVEL_VALUES[default.upper()])
    return max(level, _LEVEL_VALUES["DEBUG"])


def update_logging_config(config, enabled: bool) -> None:
    """Update the logging configuration.

    Args:
        config: The StashConfig instance to use
        enabled: Whether debug mode should be enabled
    """
    global _config, _debug_enabled
    _config = config
    _debug_enabled = enabled

    setup_handlers()
