"""Stash logging utilities.

This module provides the specialized logger for Stash client operations.

Note: All logger configuration is centralized in config/logging.py.
This module only provides specialized loggers and utilities.
"""

import sys
from pprint import pformat

from config import stash_logger

# Create specialized loggers
client_logger = stash_logger.bind(name="client")


def debug_print(obj, logger_name: str | None = None):
    """Debug printing with proper formatting.

    Args:
        obj: Object to format and log
        logger_name: Optional logger name to use (e.g., "client")
                    If None, uses root stash logger
    """
    try:
        formatted = pformat(obj, indent=2)
        if logger_name == "client":
            client_logger.debug(formatted)
        elif logger_name:
            stash_logger.bind(name=logger_name).debug(formatted)
        else:
            stash_logger.debug(formatted)
    except Exception as e:
        print(f"Failed to log debug message: {e}", file=sys.stderr)
