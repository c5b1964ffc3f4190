"""Scene marker client functionality."""

from collections.abc import Iterable

from errors import StashError

from ... import fragments
from ...types import (
    FilterMode,
    FindSceneMarkersResultType,
    SceneMarker,
    all_results_filter,
    scene_marker_filter,
)
from ..protocols import StashClientProtocol
from ..utils import build_collection


class MarkerClientMixin(StashClientProtocol):
    """Mixin for marker-related client methods."""

    async def find_markers(
        self,
        ids: Iterable[str],
        mode: FilterMode | str,
    ) -> list[SceneMarker]:
        """Find scene markers of the given performers or tags.

        Always asks for all results (``per_page: -1``, no page number).

        Args:
            ids: Performer ids or tag ids, depending on ``mode``
            mode: FilterMode.PERFORMERS or FilterMode.TAGS

        Returns:
            Markers in the order the server returned them

        Raises:
            ValueError: If ``mode`` is not a FilterMode value or ``ids``
                is a single string
            StashTransportError: If the request could not be completed
            StashHttpStatusError: If the server answered with an error status
            StashProtocolError: If the response carries no marker list

        Examples:
            ```python
            markers = await client.find_markers(["12", "40"], FilterMode.TAGS)
            for marker in markers:
                print(marker.title, marker.seconds)
            ```
        """
        marker_filter = scene_marker_filter(ids, mode)
        variables = {
            "filter": all_results_filter(),
            "scene_marker_filter": marker_filter,
        }

        try:
            data = await self.execute(fragments.FIND_MARKERS_QUERY, variables)
            return build_collection(
                data,
                "findSceneMarkers",
                "scene_markers",
                FindSceneMarkersResultType,
                url=self.url,
            )
        except StashError as e:
            self.log.error(f"Failed to find markers for {mode}: {e}")
            raise
