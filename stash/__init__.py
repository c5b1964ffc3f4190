"""Stash integration module.

Async client for the Stash GraphQL API: tags, performers and scene
markers filtered by performer or tag ids.

    from stash import FilterMode, StashClient
"""

from .client import StashClient
from .logging import client_logger, debug_print
from .types import FilterMode, Performer, SceneMarker, Tag


__all__ = [
    "FilterMode",
    "Performer",
    "SceneMarker",
    "StashClient",
    "Tag",
    "client_logger",
    "debug_print",
]
