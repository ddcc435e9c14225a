"""Custom exception hierarchy.

Every failure produced by the pipeline is an ``HttpManagerError`` and is
delivered through the ``Outcome`` result channel. Only ``ConfigurationError``
is raised directly, at setup time.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Titleable(Protocol):
    """Anything carrying a short human-readable title for display."""

    @property
    def title(self) -> str: ...


class HttpManagerError(Exception):
    """Base exception for all library errors."""

    title: str = "Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.title)


class ConfigurationError(HttpManagerError):
    """Client was configured with a base URL that cannot be parsed."""

    title = "Invalid configuration"


class RequestError(HttpManagerError):
    """Request-side failures."""

    pass


class InvalidRequestError(RequestError):
    """Request could not be constructed (bad URL composition)."""

    title = "Invalid Request"


class ResponseError(HttpManagerError):
    """Status-code driven failures."""

    pass


class InvalidResponseError(ResponseError):
    """Status is informational, a redirection, or unrecognized."""

    title = "Invalid Response"


class ClientError(ResponseError):
    """Status in the recognized 4xx range."""

    title = "Client error"


class ServerError(ResponseError):
    """Status in the recognized 5xx range."""

    title = "Internal Server error"


class TransportError(HttpManagerError):
    """Opaque wrapper around whatever the transport reported.

    The original exception is kept on ``cause`` (and chained as
    ``__cause__``) without interpretation.
    """

    title = "Transport error"

    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        super().__init__(message or f"{self.title}: {cause}")
        self.cause = cause
        self.__cause__ = cause


class DecodingError(HttpManagerError):
    """Payload was present but did not parse into the expected shape."""

    title = "Decoding error"

    def __init__(self, cause: BaseException | None = None, message: str | None = None) -> None:
        super().__init__(message or (f"{self.title}: {cause}" if cause else None))
        self.cause = cause
        self.__cause__ = cause
