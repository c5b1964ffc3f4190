"""Tag-related client functionality."""

from errors import StashError

from ... import fragments
from ...types import FindTagsResultType, Tag
from ..protocols import StashClientProtocol
from ..utils import build_collection


class TagClientMixin(StashClientProtocol):
    """Mixin for tag-related client methods."""

    async def find_tags(self) -> list[Tag]:
        """Find all tags.

        The query carries no variables; the document itself asks for
        every tag in a single page.

        Returns:
            Tags in the order the server returned them

        Raises:
            StashTransportError: If the request could not be completed
            StashHttpStatusError: If the server answered with an error status
            StashProtocolError: If the response carries no tag list
        """
        try:
            data = await self.execute(fragments.FIND_TAGS_QUERY, {})
            return build_collection(
                data, "findTags", "tags", FindTagsResultType, url=self.url
            )
        except StashError as e:
            self.log.error(f"Failed to find tags: {e}")
            raise
