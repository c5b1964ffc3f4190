"""Filter types from schema/types/filters.graphql."""

from collections.abc import Iterable
from typing import assert_never

import strawberry
from strawberry import ID

from .enums import CriterionModifier, FilterMode, SortDirectionEnum


# Sentinel page size meaning "no limit"
ALL_RESULTS = -1


@strawberry.input
class FindFilterType:
    """Input for find filter."""

    q: str | None = None  # String
    page: int | None = None  # Int
    per_page: int | None = None  # Int (-1 for all, default 25)
    sort: str | None = None  # String
    direction: SortDirectionEnum | None = None  # SortDirectionEnum


@strawberry.input
class MultiCriterionInput:
    """Input for multi criterion."""

    value: list[ID] | None = None  # [ID!]
    modifier: CriterionModifier  # CriterionModifier!
    excludes: list[ID] | None = None  # [ID!]


@strawberry.input
class HierarchicalMultiCriterionInput:
    """Input for hierarchical multi criterion."""

    value: list[ID]  # [ID!]!
    modifier: CriterionModifier  # CriterionModifier!
    depth: int | None = None  # Int
    excludes: list[ID] | None = None  # [ID!]


@strawberry.input
class DateCriterionInput:
    """Input for date criterion."""

    value: str  # String!
    value2: str | None = None  # String
    modifier: CriterionModifier  # CriterionModifier!


@strawberry.input
class TimestampCriterionInput:
    """Input for timestamp criterion."""

    value: str  # String!
    value2: str | None = None  # String
    modifier: CriterionModifier  # CriterionModifier!


@strawberry.input
class SceneMarkerFilterType:
    """Input for scene marker filter."""

    tag_id: ID | None = None  # ID (deprecated, use tags)
    tags: HierarchicalMultiCriterionInput | None = None
    scene_tags: HierarchicalMultiCriterionInput | None = None
    performers: MultiCriterionInput | None = None
    created_at: TimestampCriterionInput | None = None
    updated_at: TimestampCriterionInput | None = None
    scene_date: DateCriterionInput | None = None
    scene_created_at: TimestampCriterionInput | None = None
    scene_updated_at: TimestampCriterionInput | None = None


def all_results_filter() -> FindFilterType:
    """Find filter asking for every result in a single page.

    No page number is set; the server returns the whole result set.
    """
    return FindFilterType(per_page=ALL_RESULTS)


def scene_marker_filter(
    ids: Iterable[str], mode: FilterMode | str
) -> SceneMarkerFilterType:
    """Build the marker filter for a set of performer or tag ids.

    Exactly one criterion is populated: ``performers`` for
    ``FilterMode.PERFORMERS`` and ``tags`` (without a depth) for
    ``FilterMode.TAGS``. All other filter fields stay unset.

    Args:
        ids: Performer or tag ids, depending on ``mode``
        mode: Which association to filter on

    Returns:
        Filter with the single matching criterion

    Raises:
        ValueError: If ``mode`` is not a FilterMode value, or ``ids`` is a
            single string instead of a collection of ids
    """
    if isinstance(ids, str):
        raise ValueError(f"Expected a collection of ids, got the string {ids!r}")
    mode = FilterMode(mode)
    values = [str(id_) for id_ in ids]

    match mode:
        case FilterMode.PERFORMERS:
            return SceneMarkerFilterType(
                performers=MultiCriterionInput(
                    value=values,
                    modifier=CriterionModifier.INCLUDES,
                )
            )
        case FilterMode.TAGS:
            return SceneMarkerFilterType(
                tags=HierarchicalMultiCriterionInput(
                    value=values,
                    modifier=CriterionModifier.INCLUDES,
                )
            )
        case _:
            assert_never(mode)
