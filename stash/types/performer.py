"""Performer type for Stash."""

import strawberry

from .base import StashObject, StashResult
from .enums import GenderEnum
from .tag import Tag


@strawberry.type
class Performer(StashObject):
    """Performer type from schema/types/performer.graphql."""

    __type_name__ = "Performer"
    __nested_types__ = {"tags": (Tag, True)}

    # Required fields
    name: str  # String!
    alias_list: list[str] = strawberry.field(default_factory=list)  # [String!]!
    tags: list[Tag] = strawberry.field(default_factory=list)  # [Tag!]!

    # Optional fields
    disambiguation: str | None = None  # String
    gender: GenderEnum | None = None  # GenderEnum
    country: str | None = None  # String
    image_path: str | None = None  # String (Resolver)
    favorite: bool | None = None  # Boolean!
    rating100: int | None = None  # Int
    scene_count: int | None = None  # Int! (Resolver)

    def __post_init__(self) -> None:
        # Responses carry the enum as its plain string value
        if isinstance(self.gender, str) and not isinstance(self.gender, GenderEnum):
            self.gender = GenderEnum(self.gender)


@strawberry.type
class FindPerformersResultType(StashResult):
    """Result type for finding performers from schema/types/performer.graphql."""

    __nested_types__ = {"performers": (Performer, True)}

    count: int = 0  # Int!
    performers: list[Performer] = strawberry.field(
        default_factory=list
    )  # [Performer!]!
