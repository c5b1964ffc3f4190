"""Protocol definitions for Stash client."""

from typing import Any, Protocol


class StashClientProtocol(Protocol):
    """Protocol defining required methods for Stash client mixins."""

    # Properties
    log: Any  # loguru logger bound to the client
    url: str

    # Core methods
    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Optional query variables dictionary

        Returns:
            The ``data`` member of the response envelope
        """
        ...
