"""Stash GraphQL types used by the client."""

from .base import StashObject, StashResult
from .enums import CriterionModifier, FilterMode, GenderEnum, SortDirectionEnum
from .filters import (
    ALL_RESULTS,
    DateCriterionInput,
    FindFilterType,
    HierarchicalMultiCriterionInput,
    MultiCriterionInput,
    SceneMarkerFilterType,
    TimestampCriterionInput,
    all_results_filter,
    scene_marker_filter,
)
from .markers import FindSceneMarkersResultType, SceneMarker
from .performer import FindPerformersResultType, Performer
from .scene import Scene, ScenePathsType, VideoFile
from .tag import FindTagsResultType, Tag


__all__ = [
    "ALL_RESULTS",
    "CriterionModifier",
    "DateCriterionInput",
    "FilterMode",
    "FindFilterType",
    "FindPerformersResultType",
    "FindSceneMarkersResultType",
    "FindTagsResultType",
    "GenderEnum",
    "HierarchicalMultiCriterionInput",
    "MultiCriterionInput",
    "Performer",
    "Scene",
    "SceneMarker",
    "SceneMarkerFilterType",
    "ScenePathsType",
    "SortDirectionEnum",
    "StashObject",
    "StashResult",
    "Tag",
    "TimestampCriterionInput",
    "VideoFile",
    "all_results_filter",
    "scene_marker_filter",
]
