"""Tests for the GraphQL documents sent to Stash.

Every document must parse, and every field a query selects must exist
on the type built from the response.
"""

import dataclasses

import pytest
from gql import gql
from graphql import FieldNode, OperationDefinitionNode

from stash import fragments
from stash.types import (
    FindPerformersResultType,
    FindSceneMarkersResultType,
    FindTagsResultType,
    Performer,
    SceneMarker,
    Tag,
)


def _selection(document, root_field: str, collection_field: str) -> set[str]:
    operation = next(
        d for d in document.definitions if isinstance(d, OperationDefinitionNode)
    )
    root = next(
        s for s in operation.selection_set.selections if s.name.value == root_field
    )
    collection = next(
        s
        for s in root.selection_set.selections
        if isinstance(s, FieldNode) and s.name.value == collection_field
    )
    return {s.name.value for s in collection.selection_set.selections}


def _fields(cls) -> set[str]:
    return {f.name for f in dataclasses.fields(cls)}


@pytest.mark.parametrize(
    ("query", "root_field", "collection_field", "result_type", "item_type"),
    [
        (fragments.FIND_TAGS_QUERY, "findTags", "tags", FindTagsResultType, Tag),
        (
            fragments.FIND_PERFORMERS_QUERY,
            "findPerformers",
            "performers",
            FindPerformersResultType,
            Performer,
        ),
        (
            fragments.FIND_MARKERS_QUERY,
            "findSceneMarkers",
            "scene_markers",
            FindSceneMarkersResultType,
            SceneMarker,
        ),
    ],
    ids=["tags", "performers", "markers"],
)
def test_selection_matches_result_type(
    query, root_field, collection_field, result_type, item_type
) -> None:
    document = gql(query)

    assert collection_field in _fields(result_type)
    assert _selection(document, root_field, collection_field) <= _fields(item_type)


def test_marker_query_declares_filter_variables() -> None:
    document = gql(fragments.FIND_MARKERS_QUERY)
    operation = document.definitions[0]

    assert {v.variable.name.value for v in operation.variable_definitions} == {
        "filter",
        "scene_marker_filter",
    }


@pytest.mark.parametrize(
    "query", [fragments.FIND_TAGS_QUERY, fragments.FIND_PERFORMERS_QUERY]
)
def test_list_queries_ask_for_everything(query: str) -> None:
    assert "per_page: -1" in query
    assert "page:" not in query
