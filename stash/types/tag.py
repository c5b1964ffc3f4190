"""Tag type from schema/types/tag.graphql."""

import strawberry

from .base import StashObject, StashResult


@strawberry.type
class Tag(StashObject):
    """Tag type from schema/types/tag.graphql."""

    __type_name__ = "Tag"

    # Required fields
    name: str  # String!
    aliases: list[str] = strawberry.field(default_factory=list)  # [String!]!

    # Optional fields
    description: str | None = None  # String
    image_path: str | None = None  # String (Resolver)
    favorite: bool | None = None  # Boolean!
    scene_count: int | None = None  # Int! (Resolver)
    scene_marker_count: int | None = None  # Int! (Resolver)
    performer_count: int | None = None  # Int! (Resolver)


@strawberry.type
class FindTagsResultType(StashResult):
    """Result type for finding tags from schema/types/tag.graphql."""

    __nested_types__ = {"tags": (Tag, True)}

    count: int = 0  # Int!
    tags: list[Tag] = strawberry.field(default_factory=list)  # [Tag!]!
