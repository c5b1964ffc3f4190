"""Stash fixtures for testing the Stash client."""

from .stash_api_fixtures import stash_client, stash_client_without_key
from .stash_graphql_fixtures import (
    STASH_API_KEY,
    STASH_BASE_URL,
    STASH_GRAPHQL_URL,
    create_error_response,
    create_find_markers_result,
    create_find_performers_result,
    create_find_tags_result,
    create_graphql_response,
    create_marker_dict,
    create_performer_dict,
    create_scene_dict,
    create_tag_dict,
)


__all__ = [
    "STASH_API_KEY",
    "STASH_BASE_URL",
    "STASH_GRAPHQL_URL",
    "create_error_response",
    "create_find_markers_result",
    "create_find_performers_result",
    "create_find_tags_result",
    "create_graphql_response",
    "create_marker_dict",
    "create_performer_dict",
    "create_scene_dict",
    "create_tag_dict",
    "stash_client",
    "stash_client_without_key",
]
