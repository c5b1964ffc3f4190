"""Enum types from schema."""

from enum import Enum

import strawberry


# Core enums
@strawberry.enum
class GenderEnum(str, Enum):
    """Gender enum from schema."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    TRANSGENDER_MALE = "TRANSGENDER_MALE"
    TRANSGENDER_FEMALE = "TRANSGENDER_FEMALE"
    INTERSEX = "INTERSEX"
    NON_BINARY = "NON_BINARY"


# Filter enums
@strawberry.enum
class SortDirectionEnum(str, Enum):
    """Sort direction enum from schema."""

    ASC = "ASC"
    DESC = "DESC"


@strawberry.enum
class CriterionModifier(str, Enum):
    """Criterion modifier enum from schema."""

    EQUALS = "EQUALS"  # =
    NOT_EQUALS = "NOT_EQUALS"  # !=
    GREATER_THAN = "GREATER_THAN"  # >
    LESS_THAN = "LESS_THAN"  # <
    IS_NULL = "IS_NULL"  # IS NULL
    NOT_NULL = "NOT_NULL"  # IS NOT NULL
    INCLUDES_ALL = "INCLUDES_ALL"  # INCLUDES ALL
    INCLUDES = "INCLUDES"
    EXCLUDES = "EXCLUDES"
    MATCHES_REGEX = "MATCHES_REGEX"  # MATCHES REGEX
    NOT_MATCHES_REGEX = "NOT_MATCHES_REGEX"  # NOT MATCHES REGEX
    BETWEEN = "BETWEEN"  # >= AND <=
    NOT_BETWEEN = "NOT_BETWEEN"  # < OR >


# Client-side enums
class FilterMode(str, Enum):
    """Which association a scene marker query filters on.

    Not part of the Stash schema. Selects whether the ids handed to
    ``find_markers`` are performer ids or tag ids.
    """

    PERFORMERS = "PERFORMERS"
    TAGS = "TAGS"
