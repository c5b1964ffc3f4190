"""Base Stash client class."""

import asyncio
from typing import Any, NoReturn

import httpx
from gql import gql
from gql.transport.exceptions import (
    TransportError,
    TransportProtocolError,
    TransportQueryError,
    TransportServerError,
)
from gql.transport.httpx import HTTPXAsyncTransport
from graphql import GraphQLError

from errors import (
    StashHttpStatusError,
    StashProtocolError,
    StashTransportError,
    error_messages,
)

from ..logging import client_logger, debug_print
from .utils import to_graphql_input


# Fixed transport timeout in seconds, not configurable by callers
REQUEST_TIMEOUT = 30.0


async def _raise_for_status(response: httpx.Response) -> None:
    """httpx response hook: any non-2xx status fails the request.

    Runs before gql looks at the body, so an error status is reported
    as such even when the server also sends a GraphQL error envelope.
    """
    response.raise_for_status()


class StashClientBase:
    """Base GraphQL client for Stash."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None = None,
        verify_ssl: bool = True,
    ) -> None:
        """Initialize client.

        No connection is opened here; the HTTP pool is created by
        ``initialize()``, on ``async with`` or on the first request.

        Args:
            base_url: Server address without the /graphql suffix,
                e.g. "http://localhost:9999"
            api_key: Stash API key, sent as the ApiKey header
            verify_ssl: Whether to verify SSL certificates
        """
        self.log = client_logger
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key or ""
        self.verify_ssl = verify_ssl
        self.url = f"{self.base_url}/graphql"
        self.http_transport: HTTPXAsyncTransport | None = None
        self._initialized = False

    @classmethod
    async def create(
        cls,
        base_url: str,
        api_key: str | None = None,
        verify_ssl: bool = True,
    ) -> "StashClientBase":
        """Create and initialize a new client.

        Args:
            base_url: Server address without the /graphql suffix
            api_key: Stash API key
            verify_ssl: Whether to verify SSL certificates

        Returns:
            Initialized client instance
        """
        client = cls(base_url, api_key, verify_ssl)
        await client.initialize()
        return client

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        if self.api_key:
            return {"ApiKey": self.api_key}
        return {}

    async def initialize(self) -> None:
        """Open the HTTP connection pool.

        This is called by the context manager and by the first request
        if not already initialized.
        """
        if self._initialized:
            return

        if self.api_key:
            self.log.debug("Using API key authentication")
        else:
            self.log.warning("No API key provided")

        # HTTP/2 pool shared by all requests of this client, no retries
        base_httpx_transport = httpx.AsyncHTTPTransport(
            http2=True,
            verify=self.verify_ssl,
        )

        # HTTPXAsyncTransport from gql passes **kwargs to httpx.AsyncClient
        self.http_transport = HTTPXAsyncTransport(
            url=self.url,
            headers=self.headers,
            timeout=REQUEST_TIMEOUT,
            transport=base_httpx_transport,
            event_hooks={"response": [_raise_for_status]},
        )
        await self.http_transport.connect()

        self.log.debug(f"Using Stash endpoint at {self.url}")
        self.log.debug(f"SSL verification: {self.verify_ssl}")

        self._initialized = True

    async def _ensure_initialized(self) -> HTTPXAsyncTransport:
        """Make sure the transport is connected and return it."""
        if not self._initialized or self.http_transport is None:
            await self.initialize()
        return self.http_transport

    def _handle_gql_error(self, e: Exception) -> NoReturn:
        """Translate transport exceptions into the client's error types."""
        if isinstance(e, httpx.HTTPStatusError):
            raise StashHttpStatusError(e.response.status_code, url=self.url) from e
        if isinstance(e, TransportServerError):
            raise StashHttpStatusError(e.code or 0, url=self.url) from e
        if isinstance(e, TransportQueryError):
            raise StashProtocolError(
                "GraphQL query error", errors=e.errors, url=self.url
            ) from e
        if isinstance(e, TransportProtocolError):
            raise StashProtocolError(
                f"Invalid GraphQL response: {e}", url=self.url
            ) from e
        if isinstance(e, (httpx.RequestError, httpx.InvalidURL, TransportError)):
            raise StashTransportError(
                f"Failed to connect to {self.url}: {e}", url=self.url
            ) from e
        if isinstance(e, asyncio.TimeoutError):
            raise StashTransportError(
                f"Request to {self.url} timed out", url=self.url
            ) from e
        raise e

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL query and return the envelope's data.

        One POST per call; failures are never retried.

        Args:
            query: GraphQL query string
            variables: Optional variables for query

        Returns:
            The ``data`` member of the response envelope

        Raises:
            StashTransportError: If the request could not be completed
            StashHttpStatusError: If the server answered with a non-2xx status
            StashProtocolError: If the body is not a GraphQL answer or
                carries no data
            ValueError: If the query document does not parse
        """
        transport = await self._ensure_initialized()
        processed_vars = to_graphql_input(variables or {})

        try:
            operation = gql(query)
        except GraphQLError as e:
            self.log.error(f"GraphQL syntax error: {e}")
            self.log.error(f"Failed query: \n{query}")
            raise ValueError(f"Invalid GraphQL query syntax: {e}") from e

        definition = operation.definitions[0]
        operation_name = getattr(getattr(definition, "name", None), "value", None)
        self.log.debug(f"Executing {operation_name or 'query'} against {self.url}")
        debug_print({"variables": processed_vars}, "client")

        try:
            result = await transport.execute(
                operation, variable_values=processed_vars
            )
        except Exception as e:
            self._handle_gql_error(e)

        if result.data is None:
            raise StashProtocolError(
                "Response contained no data", errors=result.errors, url=self.url
            )
        if result.errors:
            self.log.warning(
                f"{operation_name} returned data with errors: "
                f"{'; '.join(error_messages(result.errors))}"
            )
        return dict(result.data)

    async def close(self) -> None:
        """Close the HTTP client and clean up resources.

        Safe to call more than once. Errors during cleanup are logged
        but not propagated.

        Examples:
            Using async context manager:
            ```python
            async with StashClient("http://localhost:9999", api_key) as client:
                tags = await client.find_tags()
            ```
        """
        if self.http_transport is None:
            return

        transport, self.http_transport = self.http_transport, None
        self._initialized = False
        try:
            await transport.close()
        except Exception as e:
            self.log.warning(f"Non-critical error during client cleanup: {e}")

    async def __aenter__(self) -> "StashClientBase":
        """Enter async context manager."""
        if not self._initialized:
            await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()
