"""Stash client module."""

from pathlib import Path

from config import StashConfig, get_config

from .base import StashClientBase
from .mixins.marker import MarkerClientMixin
from .mixins.performer import PerformerClientMixin
from .mixins.tag import TagClientMixin


class StashClient(
    StashClientBase,  # Base class first to provide execute()
    MarkerClientMixin,
    PerformerClientMixin,
    TagClientMixin,
):
    """Full Stash client combining all functionality.

    Example:
        ```python
        async with StashClient("http://localhost:9999", "api-key") as client:
            tags = await client.find_tags()
            markers = await client.find_markers(
                [tag.id for tag in tags[:2]], FilterMode.TAGS
            )
        ```
    """

    @classmethod
    def from_config(cls, config: StashConfig) -> "StashClient":
        """Create a client from a loaded configuration.

        Args:
            config: Configuration holding ``stash_url`` and ``api_key``

        Returns:
            New, not yet connected client
        """
        return cls(config.stash_url, config.api_key)

    @classmethod
    async def load_default(
        cls, config_path: Path | str | None = None
    ) -> "StashClient":
        """Load config.ini and create a client from it.

        Args:
            config_path: Path to config.ini, defaults to ./config.ini

        Returns:
            New, not yet connected client

        Raises:
            ConfigError: If the configuration cannot be loaded
        """
        config = await get_config(config_path)
        return cls.from_config(config)


__all__ = ["StashClient", "StashClientBase"]
