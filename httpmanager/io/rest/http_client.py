"""HTTP client: one request in, one ``Outcome`` out.

Architecture:
    ``request()`` is the single pipeline shared by both calling conventions:
    1. Build the request (``RequestBuilder``); failure short-circuits with
       ``InvalidRequestError``.
    2. Execute it through the ``Transport``.
    3. A transport-level error is wrapped in ``TransportError`` and returned,
       bypassing status classification.
    4. Otherwise ``HttpResponse`` decides status and payload presence.

    Awaitable verbs (``get``/``post``/``put``/``delete``) await ``request()``
    directly; the ``*_with_callback`` adapters hand the same coroutine to
    ``callbacks.dispatch``.

Design Decisions:
    - No shared mutable state between calls; the client is safe to use from
      concurrent tasks without locking.
    - No retries, caching or credential handling.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from ...core.enums import ContentMode
from ...core.exceptions import InvalidRequestError, TransportError
from ...core.outcome import Failure, Outcome
from .callbacks import Completion, dispatch
from .request_builder import Request, RequestBuilder
from .response import HttpResponse
from .transport import AiohttpTransport, Transport

logger = logging.getLogger(__name__)


class HttpClient:
    """Issue requests against a fixed base URL."""

    def __init__(
        self,
        base_url: str,
        transport: Transport | None = None,
        *,
        scheme: str = "https",
        content_mode: ContentMode = ContentMode.JSON,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Absolute URL providing host (and any query/fragment)
            transport: Transport to execute requests with (default: aiohttp)
            scheme: Scheme applied to every request
            content_mode: Wire format advertised in Accept/Content-Type
            headers: Default headers added to every request

        Raises:
            ConfigurationError: If ``base_url`` cannot be parsed
        """
        # Validate at setup time; a bad base URL is not a runtime outcome
        RequestBuilder(base_url)
        self.base_url = base_url
        self.transport: Transport = transport or AiohttpTransport()
        self._owns_transport = transport is None
        self.scheme = scheme
        self.content_mode = content_mode
        self.headers = dict(headers or {})

    def build_request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request | None:
        builder = RequestBuilder(self.base_url)
        builder.scheme = self.scheme
        builder.method = method
        builder.path = path
        builder.body = body
        builder.content_mode = self.content_mode
        builder.headers = {**self.headers, **(headers or {})}
        return builder.request()

    async def request(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Outcome[bytes | None]:
        """Run one request through the pipeline.

        Returns:
            ``Success`` with the payload (``None`` when empty) or ``Failure``
            with an ``HttpManagerError``

        Raises:
            asyncio.CancelledError: If the awaiting task is cancelled
        """
        req = self.build_request(method, path, body, headers)
        if req is None:
            return Failure(
                InvalidRequestError(f"Cannot build {method.upper()} request for path {path!r}")
            )

        logger.debug("%r", req)
        transport_response = await self.transport.execute(req)
        if transport_response.error is not None:
            return Failure(TransportError(transport_response.error))

        response = HttpResponse.from_status(transport_response.status_code)
        logger.debug(
            "%s %s -> %s (%s)",
            req.method,
            req.url,
            response.status_code,
            response.status_class.name,
        )
        return response.result(transport_response.body)

    async def get(
        self, path: str, headers: Mapping[str, str] | None = None
    ) -> Outcome[bytes | None]:
        return await self.request("get", path, headers=headers)

    async def post(
        self, path: str, body: bytes | None = None, headers: Mapping[str, str] | None = None
    ) -> Outcome[bytes | None]:
        return await self.request("post", path, body, headers)

    async def put(
        self, path: str, body: bytes | None = None, headers: Mapping[str, str] | None = None
    ) -> Outcome[bytes | None]:
        return await self.request("put", path, body, headers)

    async def delete(
        self, path: str, headers: Mapping[str, str] | None = None
    ) -> Outcome[bytes | None]:
        return await self.request("delete", path, headers=headers)

    def request_with_callback(
        self,
        method: str,
        path: str,
        complete: Completion[bytes | None],
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> Any:
        """Callback-style ``request``; returns the cancellable scheduled call."""
        return dispatch(self.request(method, path, body, headers), complete, loop=loop)

    def get_with_callback(
        self,
        path: str,
        complete: Completion[bytes | None],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> Any:
        """Callback-style ``get``."""
        return dispatch(self.get(path), complete, loop=loop)

    async def close(self) -> None:
        """Close the transport if this client created it.

        A transport passed in by the caller is left open; its owner closes it.
        """
        if not self._owns_transport:
            return
        close = getattr(self.transport, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
