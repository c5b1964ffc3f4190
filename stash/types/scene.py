"""Scene types from schema/types/scene.graphql.

Only the parts of a scene that marker queries select are modelled.
"""

import strawberry

from .base import StashObject, StashResult
from .performer import Performer


@strawberry.type
class ScenePathsType(StashResult):
    """Type containing path information for a scene."""

    screenshot: str | None = None  # String
    preview: str | None = None  # String
    stream: str | None = None  # String
    funscript: str | None = None  # String


@strawberry.type
class VideoFile(StashObject):
    """Video file type from schema/types/file.graphql."""

    __type_name__ = "VideoFile"

    path: str  # String!
    basename: str | None = None  # String!
    duration: float | None = None  # Float!
    width: int | None = None  # Int!
    height: int | None = None  # Int!


@strawberry.type
class Scene(StashObject):
    """Scene type from schema/types/scene.graphql."""

    __type_name__ = "Scene"
    __nested_types__ = {
        "files": (VideoFile, True),
        "paths": (ScenePathsType, False),
        "performers": (Performer, True),
    }

    title: str | None = None  # String
    interactive: bool | None = None  # Boolean!
    files: list[VideoFile] = strawberry.field(default_factory=list)  # [VideoFile!]!
    paths: ScenePathsType | None = None  # ScenePathsType! (Resolver)
    performers: list[Performer] = strawberry.field(
        default_factory=list
    )  # [Performer!]!
