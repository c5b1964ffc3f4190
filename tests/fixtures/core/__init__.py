"""Core fixtures (configuration)."""

from .config_fixtures import config_file, stash_config, temp_config_dir, write_config


__all__ = ["config_file", "stash_config", "temp_config_dir", "write_config"]
