"""Base types for Stash models.

Note: While this is not a schema interface, it represents a common pattern
in the schema where the record types have an id field. The client never
writes these objects back, it only builds them from query results.
"""

import dataclasses
from typing import Any, ClassVar, TypeVar

import strawberry


T = TypeVar("T", bound="StashResult")


class StashResult:
    """Mixin that builds strawberry result types from response dictionaries.

    ``__nested_types__`` maps a field name to ``(target_type, is_list)`` so
    nested objects in the response are built into their typed classes
    instead of being left as raw dictionaries.
    """

    __nested_types__: ClassVar[dict[str, tuple[type["StashResult"], bool]]] = {}

    @classmethod
    def _field_names(cls) -> set[str]:
        return {f.name for f in dataclasses.fields(cls)}

    @classmethod
    def from_dict(cls: type[T], data: dict[str, Any]) -> T:
        """Build an instance from a GraphQL response dictionary.

        Keys the type does not declare are dropped, so extra fields
        selected by a query do not break construction.

        Args:
            data: Response dictionary for a single object

        Returns:
            New instance
        """
        known = cls._field_names()
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                continue
            nested = cls.__nested_types__.get(key)
            if nested is not None and value is not None:
                target, is_list = nested
                if is_list:
                    value = [target.from_dict(item) for item in value]
                else:
                    value = target.from_dict(value)
            kwargs[key] = value
        return cls(**kwargs)


@strawberry.interface
class StashObject(StashResult):
    """Base interface for records identified by a Stash ID.

    Identity is the remote id; the client never assigns ids itself.
    """

    # GraphQL type name (e.g., "Tag", "Performer")
    __type_name__: ClassVar[str]

    id: strawberry.ID

