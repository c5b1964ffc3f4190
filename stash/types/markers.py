"""Scene marker types from schema/types/scene-marker.graphql."""

import strawberry

from .base import StashObject, StashResult
from .scene import Scene
from .tag import Tag


@strawberry.type
class SceneMarker(StashObject):
    """Scene marker type from schema/types/scene-marker.graphql."""

    __type_name__ = "SceneMarker"
    __nested_types__ = {
        "scene": (Scene, False),
        "primary_tag": (Tag, False),
        "tags": (Tag, True),
    }

    # Required fields
    title: str  # String!
    seconds: float  # Float! (The required start time of the marker (in seconds). Supports decimals.)
    scene: Scene | None = None  # Scene!
    primary_tag: Tag | None = None  # Tag!
    tags: list[Tag] = strawberry.field(default_factory=list)  # [Tag!]!
    stream: str | None = None  # String! (The path to stream this marker) (Resolver)
    preview: str | None = None  # String! (The path to the preview image for this marker) (Resolver)
    screenshot: str | None = None  # String! (The path to the screenshot image for this marker) (Resolver)

    # Optional fields
    end_seconds: float | None = (
        None  # Float (The optional end time of the marker (in seconds). Supports decimals.)
    )


@strawberry.type
class FindSceneMarkersResultType(StashResult):
    """Result type for finding scene markers from schema/types/scene-marker.graphql."""

    __nested_types__ = {"scene_markers": (SceneMarker, True)}

    count: int = 0  # Int!
    scene_markers: list[SceneMarker] = strawberry.field(
        default_factory=list
    )  # [SceneMarker!]!
