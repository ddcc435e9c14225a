"""Transport boundary: perform one HTTP request, report body/status/error.

Architecture:
    The HTTP client only depends on the ``Transport`` protocol, which turns a
    ``Request`` into a ``TransportResponse``. ``AiohttpTransport`` is the
    default implementation on top of ``aiohttp.ClientSession``.

Design Decisions:
    - Errors as values: connectivity failures (``aiohttp.ClientError``,
      timeouts) are returned in ``TransportResponse.error`` instead of being
      raised, so the client can pass them through opaquely.
    - Cancellation is not an error: ``asyncio.CancelledError`` propagates and
      aborts the in-flight request.
    - Redirects are never followed; 3xx responses reach the classifier.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import aiohttp

from .request_builder import Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """What a single transport call delivered."""

    body: bytes | None = None
    status_code: int | None = None
    error: BaseException | None = None


@runtime_checkable
class Transport(Protocol):
    """Protocol for anything that can execute a ``Request``."""

    async def execute(self, request: Request) -> TransportResponse:
        """Execute ``request`` once.

        Returns:
            TransportResponse with body/status on completion, or with
            ``error`` set on a transport-level failure

        Raises:
            asyncio.CancelledError: If the awaiting task is cancelled
        """
        ...


@dataclass
class TransportConfig:
    """Settings for ``AiohttpTransport``.

    Attributes:
        timeout: Total seconds allowed per request
        connect_timeout: Seconds allowed to establish a connection (None = no limit)
        user_agent: User-Agent header sent with every request (None = aiohttp default)
    """

    timeout: float = 30.0
    connect_timeout: float | None = None
    user_agent: str | None = None


class AiohttpTransport:
    """``Transport`` backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(self, config: TransportConfig | None = None) -> None:
        self.config = config or TransportConfig()
        self.timeout = aiohttp.ClientTimeout(
            total=self.config.timeout, connect=self.config.connect_timeout
        )
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            headers = {"User-Agent": self.config.user_agent} if self.config.user_agent else None
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=headers)
        return self._session

    async def execute(self, request: Request) -> TransportResponse:
        try:
            async with self.session.request(
                request.method,
                request.url,
                data=request.body,
                headers=request.headers,
                allow_redirects=False,
            ) as response:
                body = await response.read()
                return TransportResponse(body=body, status_code=response.status)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Transport failure for %s %s: %s", request.method, request.url, e)
            return TransportResponse(error=e)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
