"""Helpers for building Stash GraphQL response payloads.

Used with respx to mock the HTTP layer:

    respx.post(STASH_GRAPHQL_URL).mock(
        return_value=httpx.Response(
            200, json=create_graphql_response("findTags", create_find_tags_result())
        )
    )
"""

from typing import Any


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
]


STASH_BASE_URL = "http://localhost:9999"
STASH_GRAPHQL_URL = f"{STASH_BASE_URL}/graphql"
STASH_API_KEY = "test-api-key"


def create_graphql_response(
    query_name: str,
    data: dict[str, Any],
    errors: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Wrap a root field result in a GraphQL response envelope."""
    response: dict[str, Any] = {"data": {query_name: data}}
    if errors:
        response["errors"] = errors
    return response


def create_error_response(*messages: str, data_key: bool = False) -> dict[str, Any]:
    """Envelope carrying only errors, optionally with an explicit null data."""
    response: dict[str, Any] = {
        "errors": [{"message": message, "path": None} for message in messages]
    }
    if data_key:
        response["data"] = None
    return response


def create_tag_dict(id: str, name: str, **kwargs: Any) -> dict[str, Any]:
    """Tag as selected by TAG_FIELDS."""
    tag = {
        "id": id,
        "name": name,
        "aliases": [],
        "description": None,
        "image_path": f"http://localhost:9999/tag/{id}/image",
        "favorite": False,
        "scene_count": 0,
        "scene_marker_count": 0,
        "performer_count": 0,
    }
    tag.update(kwargs)
    return tag


def create_performer_dict(id: str, name: str, **kwargs: Any) -> dict[str, Any]:
    """Performer as selected by PERFORMER_FIELDS."""
    performer = {
        "id": id,
        "name": name,
        "disambiguation": None,
        "alias_list": [],
        "gender": None,
        "country": None,
        "image_path": f"http://localhost:9999/performer/{id}/image",
        "favorite": False,
        "rating100": None,
        "scene_count": 0,
        "tags": [],
    }
    performer.update(kwargs)
    return performer


def create_scene_dict(id: str, title: str | None = None, **kwargs: Any) -> dict[str, Any]:
    """Scene as nested in MARKER_FIELDS."""
    scene = {
        "id": id,
        "title": title,
        "interactive": False,
        "files": [
            {
                "id": f"file-{id}",
                "path": f"/media/scene_{id}.mp4",
                "basename": f"scene_{id}.mp4",
                "duration": 600.0,
                "width": 1920,
                "height": 1080,
            }
        ],
        "paths": {
            "screenshot": f"http://localhost:9999/scene/{id}/screenshot",
            "preview": f"http://localhost:9999/scene/{id}/preview",
            "stream": f"http://localhost:9999/scene/{id}/stream",
            "funscript": None,
        },
        "performers": [],
    }
    scene.update(kwargs)
    return scene


def create_marker_dict(
    id: str,
    title: str,
    seconds: float = 0.0,
    scene: dict[str, Any] | None = None,
    primary_tag: dict[str, Any] | None = None,
    **kwargs: Any,
) -> dict[str, Any]:
    """Scene marker as selected by MARKER_FIELDS."""
    marker = {
        "id": id,
        "title": title,
        "seconds": seconds,
        "end_seconds": None,
        "stream": f"http://localhost:9999/scene/1/scene_marker/{id}/stream",
        "preview": f"http://localhost:9999/scene/1/scene_marker/{id}/preview",
        "screenshot": f"http://localhost:9999/scene/1/scene_marker/{id}/screenshot",
        "primary_tag": primary_tag or {"id": "1", "name": "Primary"},
        "tags": [],
        "scene": scene or create_scene_dict("1", "Scene 1"),
    }
    marker.update(kwargs)
    return marker


def create_find_tags_result(tags: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    tags = tags or []
    return {"count": len(tags), "tags": tags}


def create_find_performers_result(
    performers: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    performers = performers or []
    return {"count": len(performers), "performers": performers}


def create_find_markers_result(
    markers: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    markers = markers or []
    return {"count": len(markers), "scene_markers": markers}
