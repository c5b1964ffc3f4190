"""Errors/Exceptions"""

from typing import Any


# region Exceptions


class ConfigError(RuntimeError):
    """This error is raised when configuration data is invalid.

    Invalid data may have been provided by config.ini, or the file
    may be missing or still contain placeholder values.
    """

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)


class StashError(RuntimeError):
    """Base error for failed requests against the Stash GraphQL API."""

    def __init__(self, message: str, url: str | None = None) -> None:
        self.url = url
        self.message = message
        super().__init__(message)


class StashTransportError(StashError):
    """This error is raised when a request could not be completed.

    This may be caused by DNS failures, refused connections,
    TLS problems or timeouts at the transport layer.
    """


class StashHttpStatusError(StashError):
    """Raised when the Stash server answers with a non-success status code.

    A 401 usually means the API key is missing or wrong.
    """

    def __init__(self, status_code: int, url: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            f"Stash server at {url} responded with HTTP {status_code}", url=url
        )


class StashProtocolError(StashError):
    """Raised when the response envelope is unusable.

    Either the body is not a GraphQL JSON answer, the envelope has no
    ``data``, or the expected root field is missing. Any ``errors``
    entries reported by the server are kept in ``errors`` and their
    messages are part of the exception text.
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        url: str | None = None,
    ) -> None:
        self.errors = list(errors or [])
        messages = error_messages(self.errors)
        if messages:
            message = f"{message}: {'; '.join(messages)}"
        super().__init__(message, url=url)


def error_messages(errors: list[Any]) -> list[str]:
    """Extract the human readable messages from GraphQL error entries."""
    messages = []
    for error in errors:
        if isinstance(error, dict):
            messages.append(str(error.get("message", error)))
        else:
            messages.append(str(error))
    return messages


# endregion


__all__ = [
    "ConfigError",
    "StashError",
    "StashHttpStatusError",
    "StashProtocolError",
    "StashTransportError",
    "error_messages",
]
