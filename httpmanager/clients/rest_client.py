"""Generic resource client layered on ``HttpClient``.

Architecture:
    ``RestClient[T]`` maps a resource type onto a base path:
    - collection: ``{path}`` (``list``, ``create``)
    - item: ``{path}/{identifier}`` (``show``, ``update``, ``destroy``)

    Payload handling follows one policy: a successful response without a
    body is "nothing found" (empty list / ``None``), never an error, while a
    body that does not decode into ``T`` is a ``DecodingError``.

Design Decisions:
    - Generic over a capability, not a base class: ``T`` only has to be
      something pydantic can validate that carries an ``id``. ``Resource``
      is the convenient base providing the wire conventions.
    - Encoding/decoding goes through ``pydantic.TypeAdapter``; the key and date
      conventions are fixed configuration, not per-call options.
    - Both calling conventions share the awaitable methods; the callback
      adapters only schedule them.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..core.exceptions import DecodingError
from ..core.outcome import Outcome, Success, catching
from ..io.rest.callbacks import Completion, dispatch
from ..io.rest.http_client import HttpClient
from ..models.resource import Restable

T = TypeVar("T", bound=Restable)

logger = logging.getLogger(__name__)


class RestClient(Generic[T]):
    """List, fetch and modify one resource type over REST.

    Example:
        >>> items = RestClient(HttpClient("https://api.example.com"), "/items", Item)
        >>> outcome = await items.show("42")
        >>> item = outcome.unwrap()
    """

    def __init__(self, client: HttpClient, path: str, resource_type: type[T]) -> None:
        self.client = client
        self.path = path
        self.resource_type = resource_type
        self._one: TypeAdapter[T] = TypeAdapter(resource_type)
        self._many: TypeAdapter[list[T]] = TypeAdapter(list[resource_type])  # type: ignore[valid-type]

    def item_path(self, identifier: Any) -> str:
        return f"{self.path.rstrip('/')}/{identifier}"

    # --- codec -------------------------------------------------------------

    def encode(self, resource: T) -> bytes:
        """Serialize a resource with snake_case keys and ISO-8601 dates."""
        return self._one.dump_json(resource, by_alias=True)

    def decode_one(self, payload: bytes | None) -> Outcome[T | None]:
        if payload is None:
            return Success(None)
        return catching(
            lambda: self._one.validate_json(payload),
            self._decoding_error,
            exceptions=(ValidationError,),
        )

    def decode_list(self, payload: bytes | None) -> Outcome[list[T]]:
        if payload is None:
            return Success([])
        return catching(
            lambda: self._many.validate_json(payload),
            self._decoding_error,
            exceptions=(ValidationError,),
        )

    def _decoding_error(self, exc: Exception) -> DecodingError:
        logger.debug("Failed to decode %s payload: %s", self.resource_type.__name__, exc)
        return DecodingError(exc, f"Cannot decode {self.resource_type.__name__}: {exc}")

    # --- operations --------------------------------------------------------

    async def list(self) -> Outcome[list[T]]:
        """GET the collection; no payload yields an empty list."""
        outcome = await self.client.get(self.path)
        return outcome.flat_map(self.decode_list)

    async def show(self, identifier: Any = None) -> Outcome[T | None]:
        """GET one resource (or the bare path when ``identifier`` is None)."""
        path = self.path if identifier is None else self.item_path(identifier)
        outcome = await self.client.get(path)
        return outcome.flat_map(self.decode_one)

    async def create(self, resource: T) -> Outcome[T | None]:
        """POST the encoded resource to the collection."""
        outcome = await self.client.post(self.path, self.encode(resource))
        return outcome.flat_map(self.decode_one)

    async def update(self, resource: T) -> Outcome[T | None]:
        """PUT the encoded resource to its item path."""
        outcome = await self.client.put(self.item_path(resource.id), self.encode(resource))
        return outcome.flat_map(self.decode_one)

    async def destroy(self, identifier: Any) -> Outcome[None]:
        """DELETE one resource; any response body is ignored."""
        outcome = await self.client.delete(self.item_path(identifier))
        return outcome.map(lambda _: None)

    # --- callback adapters -------------------------------------------------

    def list_with_callback(
        self, complete: Completion[list[T]], *, loop: asyncio.AbstractEventLoop | None = None
    ) -> Any:
        return dispatch(self.list(), complete, loop=loop)

    def show_with_callback(
        self,
        complete: Completion[T | None],
        identifier: Any = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> Any:
        return dispatch(self.show(identifier), complete, loop=loop)
