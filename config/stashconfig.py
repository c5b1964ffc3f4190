"""Configuration Class for Shared State"""

from __future__ import annotations

from configparser import ConfigParser
from dataclasses import dataclass, field
from pathlib import Path


REPLACE_ME = "ReplaceMe"


@dataclass
class StashConfig:
    # region Fields

    # region File-Independent Fields

    # Configuration file
    config_path: Path | None = None

    # Log directory (defaults to ./logs)
    log_dir: Path | None = None

    # Misc
    debug: bool = False

    # Objects
    _parser: ConfigParser = field(
        default_factory=lambda: ConfigParser(interpolation=None),
        repr=False,
    )

    # endregion File-Independent

    # region config.ini Fields

    # Stash
    stash_url: str | None = None
    api_key: str | None = None

    # Logging
    log_levels: dict[str, str] = field(
        default_factory=lambda: {
            "stash_console": "INFO",
            "stash_file": "INFO",
            "http": "WARNING",
        }
    )

    # endregion config.ini

    # endregion Fields

    # region Methods

    def stash_url_is_valid(self) -> bool:
        if not self.stash_url:
            return False

        return REPLACE_ME not in self.stash_url

    def api_key_is_placeholder(self) -> bool:
        return self.api_key is not None and REPLACE_ME in self.api_key

    def _sync_settings(self) -> None:
        """Syncs the settings of the config object
        to the config parser/config file.

        This helper is required before saving.
        """
        for section in ["Stash", "Options", "Logging"]:
            if not self._parser.has_section(section):
                self._parser.add_section(section)

        self._parser.set("Stash", "stash_url", self.stash_url or REPLACE_ME)
        self._parser.set(
            "Stash",
            "api_key",
            REPLACE_ME if self.api_key is None else self.api_key,
        )
        self._parser.set("Options", "debug", str(self.debug))

        for name, level in self.log_levels.items():
            self._parser.set("Logging", name, level)

    def _load_raw_config(self) -> list[str]:
        if self.config_path is None:
            return []

        else:
            return self._parser.read(self.config_path, encoding="utf-8")

    def _save_config(self) -> bool:
        if self.config_path is None:
            return False

        else:
            self._sync_settings()

            with self.config_path.open("w", encoding="utf-8") as f:
                self._parser.write(f)
                return True

    # endregion Methods
