"""Utility functions for the Stash client.

This module provides common utility functions used by the client mixins.
"""

from __future__ import annotations

import dataclasses
from datetime import datetime
from enum import Enum
from typing import Any

from errors import StashProtocolError

from ..types import StashResult


def to_graphql_input(value: Any) -> Any:
    """Convert strawberry input objects into GraphQL variable values.

    Unset (``None``) fields are omitted rather than sent as ``null``,
    enums become their values and datetimes ISO strings.

    Args:
        value: Input object, dict, list or scalar

    Returns:
        JSON-serializable value

    Examples:
        >>> to_graphql_input(FindFilterType(per_page=-1))
        {'per_page': -1}
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            k: to_graphql_input(v)
            for k, v in vars(value).items()
            if not k.startswith("_") and v is not None
        }
    if isinstance(value, dict):
        return {k: to_graphql_input(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_graphql_input(v) for v in value]
    return value


def unwrap_collection(
    data: dict[str, Any],
    root_field: str,
    collection_field: str,
    url: str | None = None,
) -> dict[str, Any]:
    """Return the result object under ``data[root_field]``.

    Args:
        data: The ``data`` member of the response envelope
        root_field: Query root field (e.g. "findTags")
        collection_field: Collection inside the root field (e.g. "tags")
        url: Endpoint, for error reporting

    Returns:
        The root field's object, guaranteed to hold ``collection_field``

    Raises:
        StashProtocolError: If either field is missing
    """
    result = data.get(root_field)
    if not isinstance(result, dict):
        raise StashProtocolError(
            f"Response data has no '{root_field}' object", url=url
        )
    if not isinstance(result.get(collection_field), list):
        raise StashProtocolError(
            f"Response field '{root_field}' has no '{collection_field}' list",
            url=url,
        )
    return result


def build_collection(
    data: dict[str, Any],
    root_field: str,
    collection_field: str,
    result_type: type[StashResult],
    url: str | None = None,
) -> list[Any]:
    """Build the typed collection under ``data[root_field]``.

    Args:
        data: The ``data`` member of the response envelope
        root_field: Query root field (e.g. "findTags")
        collection_field: Collection inside the root field (e.g. "tags")
        result_type: Result type holding the collection
        url: Endpoint, for error reporting

    Returns:
        The collection's typed records, in server order

    Raises:
        StashProtocolError: If either field is missing or a record does
            not fit its type
    """
    result = unwrap_collection(data, root_field, collection_field, url=url)
    try:
        return getattr(result_type.from_dict(result), collection_field)
    except (TypeError, ValueError, AttributeError) as e:
        raise StashProtocolError(
            f"Malformed {root_field} result: {e}", url=url
        ) from e
