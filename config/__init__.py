"""Configuration File Manipulation"""

from .logging import (  # isort:skip
    get_log_level,
    init_logging_config,
    set_debug_enabled,
    stash_logger,
    update_logging_config,
)
from .stashconfig import StashConfig  # isort:skip
from .config import get_config, load_config, save_config_or_raise  # isort:skip


__all__ = [
    "StashConfig",
    "get_config",
    "get_log_level",
    "init_logging_config",
    "load_config",
    "save_config_or_raise",
    "set_debug_enabled",
    "stash_logger",
    "update_logging_config",
]
