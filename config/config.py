"""Configuration File Manipulation"""

import asyncio
import configparser
from pathlib import Path

from config.logging import VALID_LEVELS, stash_logger
from config.stashconfig import REPLACE_ME, StashConfig
from errors import ConfigError


logger = stash_logger.bind(name="config")


def save_config_or_raise(config: StashConfig) -> bool:
    """Tries to save the configuration to `config.ini` or
    raises a `ConfigError` otherwise.

    :param config: The program configuration.
    :type config: StashConfig

    :return: True if configuration was successfully written.
    :rtype: bool

    :raises ConfigError: When the configuration file could not be saved.
        This may be due to invalid path issues or permission/security
        software problems.
    """
    try:
        saved = config._save_config()
    except OSError as e:
        raise ConfigError(
            f"Configuration data could not be saved to '{config.config_path}': {e}"
        ) from e

    if not saved:
        raise ConfigError(
            f"Internal error: Configuration data could not be saved to '{config.config_path}'. "
            "Invalid path or permission/security software problem."
        )
    return True


def _ensure_section_exists(parser: configparser.ConfigParser, section: str) -> None:
    """Ensure a section exists in the config parser."""
    if not parser.has_section(section):
        parser.add_section(section)


def _handle_stash_section(config: StashConfig) -> None:
    """Handle Stash section configuration."""
    stash_section = "Stash"
    if not config._parser.has_section(stash_section):
        raise KeyError(stash_section)

    # NoOptionError when missing, the URL is mandatory
    config.stash_url = config._parser.get(stash_section, "stash_url").strip()
    config.api_key = config._parser.get(stash_section, "api_key", fallback="").strip()

    if not config.stash_url_is_valid():
        raise ConfigError(
            f"'stash_url' in {config.config_path} is not set. "
            "Enter the address of your Stash server, e.g. http://localhost:9999"
        )
    if config.api_key_is_placeholder():
        raise ConfigError(
            f"'api_key' in {config.config_path} still holds a placeholder. "
            "Copy the API key from Stash > Settings > Security, or leave it empty."
        )


def _handle_options_section(config: StashConfig) -> None:
    """Handle Options section configuration."""
    options_section = "Options"
    _ensure_section_exists(config._parser, options_section)

    config.debug = config._parser.getboolean(options_section, "debug", fallback=False)


def _handle_logging_section(config: StashConfig) -> None:
    """Handle Logging section configuration."""
    logging_section = "Logging"
    _ensure_section_exists(config._parser, logging_section)

    config.log_levels = {
        "stash_console": config._parser.get(
            logging_section, "stash_console", fallback="INFO"
        ).upper(),
        "stash_file": config._parser.get(
            logging_section, "stash_file", fallback="INFO"
        ).upper(),
        "http": config._parser.get(logging_section, "http", fallback="WARNING").upper(),
    }

    for name, level in config.log_levels.items():
        if level not in VALID_LEVELS:
            logger.warning(f"Invalid log level '{level}' for logger '{name}', using 'INFO'")
            config.log_levels[name] = "INFO"


def _handle_config_error(e: Exception, config: StashConfig) -> None:
    """Handle configuration errors with appropriate messages."""
    error_string = str(e)

    if isinstance(e, ConfigError):
        raise e
    if isinstance(e, configparser.NoOptionError):
        raise ConfigError(
            f"Your config file {config.config_path} is incomplete: {error_string}"
        ) from e
    if isinstance(e, ValueError):
        if "a boolean" in error_string:
            raise ConfigError(
                f"'{error_string.rsplit('boolean: ')[1]}' is malformed in the configuration file! "
                "This value can only be True or False"
            ) from e
        raise ConfigError(
            f"You have entered a wrong value in the config file -> '{error_string}'"
        ) from e
    if isinstance(e, KeyError):
        raise ConfigError(
            f"Section {e} is missing or malformed in the configuration file!"
        ) from e
    raise ConfigError(
        f"An error occurred while reading the configuration file: {error_string}"
    ) from e


def _write_template(config: StashConfig) -> None:
    """Write a config.ini with placeholders for the user to fill in."""
    config.stash_url = None
    config.api_key = None
    save_config_or_raise(config)


def load_config(config: StashConfig) -> None:
    """Loads the program configuration from file.

    :param StashConfig config: The configuration object to fill.

    :raises ConfigError: When the file is missing, incomplete or
        holds invalid values.
    """
    # Initialize logging config first
    from config.logging import init_logging_config, set_debug_enabled

    init_logging_config(config)
    set_debug_enabled(config.debug)

    if config.config_path is None:
        config.config_path = Path.cwd() / "config.ini"

    logger.info(f"Reading {config.config_path} ...")

    if not config.config_path.exists():
        logger.warning(f"Configuration file {config.config_path} not found.")
        _write_template(config)
        raise ConfigError(
            f"A default configuration file was generated at {config.config_path}. "
            f"Replace the '{REPLACE_ME}' values and run again."
        )

    try:
        if not config._load_raw_config():
            raise ConfigError(f"Could not read {config.config_path}")

        _handle_stash_section(config)
        _handle_options_section(config)
        _handle_logging_section(config)

    except (
        ConfigError,
        configparser.Error,
        ValueError,
        KeyError,
    ) as e:
        _handle_config_error(e, config)

    # Apply levels from the file
    from config.logging import update_logging_config

    update_logging_config(config, config.debug)
    logger.debug(f"Using Stash server at {config.stash_url}")


async def get_config(config_path: Path | str | None = None) -> StashConfig:
    """Load the configuration without blocking the event loop.

    Args:
        config_path: Path to config.ini, defaults to ./config.ini

    Returns:
        Filled StashConfig

    Raises:
        ConfigError: If the configuration cannot be used
    """
    config = StashConfig(
        config_path=Path(config_path) if config_path is not None else None
    )
    await asyncio.to_thread(load_config, config)
    return config
