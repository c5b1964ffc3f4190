"""Performer-related client functionality."""

from errors import StashError

from ... import fragments
from ...types import FindPerformersResultType, Performer
from ..protocols import StashClientProtocol
from ..utils import build_collection


class PerformerClientMixin(StashClientProtocol):
    """Mixin for performer-related client methods."""

    async def find_performers(self) -> list[Performer]:
        """Find all performers.

        Returns:
            Performers in the order the server returned them

        Raises:
            StashTransportError: If the request could not be completed
            StashHttpStatusError: If the server answered with an error status
            StashProtocolError: If the response carries no performer list
        """
        try:
            data = await self.execute(fragments.FIND_PERFORMERS_QUERY, {})
            return build_collection(
                data,
                "findPerformers",
                "performers",
                FindPerformersResultType,
                url=self.url,
            )
        except StashError as e:
            self.log.error(f"Failed to find performers: {e}")
            raise
