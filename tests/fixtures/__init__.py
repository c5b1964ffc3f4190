"""
Fixture loading utilities for pytest tests.

This module re-exports the factories, payload builders and fixtures
used across the test suite.
"""

from .core import config_file, stash_config, temp_config_dir, write_config
from .stash import (
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
    stash_client,
    stash_client_without_key,
)
from .stash_type_factories import (
    PerformerFactory,
    SceneFactory,
    SceneMarkerFactory,
    TagFactory,
)


__all__ = [
    "STASH_API_KEY",
    "STASH_BASE_URL",
    "STASH_GRAPHQL_URL",
    "PerformerFactory",
    "SceneFactory",
    "SceneMarkerFactory",
    "TagFactory",
    "config_file",
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
    "stash_config",
    "temp_config_dir",
    "write_config",
]
