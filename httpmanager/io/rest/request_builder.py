"""Request builder for assembling well-formed HTTP requests.

Architecture:
    ``RequestBuilder`` starts from the components of a base URL and overrides
    the scheme and path, leaving any query or fragment of the base URL
    untouched. ``request()`` freezes the result into an immutable ``Request``.

Design Decisions:
    - Setup vs runtime failures: a base URL without a network location is a
      configuration error raised from the constructor, while a path that
      cannot be composed into a valid URL makes ``request()`` return ``None``
      (callers map that to ``InvalidRequestError``).
    - Header order: the content-mode ``Accept``/``Content-Type`` pair is set
      first and caller headers are applied afterwards, so a caller header with
      the same (case-insensitive) name replaces the fixed value.
    - Debug representation is for diagnostics only and is never parsed back.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import SplitResult, quote, urlsplit, urlunsplit

from multidict import CIMultiDict, CIMultiDictProxy

from ...core.enums import ContentMode
from ...core.exceptions import ConfigurationError

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
# Characters left as-is when percent-encoding a path
_PATH_SAFE = "/:@!$&'()*+,;=-._~%"


def _describe(method: str, url: str | None, headers: Mapping[str, str], body: bytes | None) -> str:
    text = f"Request to: {method.upper()} - {url or 'Not valid URL'} -H {dict(headers)!r}"
    if body is not None:
        try:
            text += f" -d {body.decode('utf-8')}"
        except UnicodeDecodeError:
            pass
    return text


@dataclass(frozen=True, repr=False)
class Request:
    """Immutable, fully-formed HTTP request."""

    method: str
    url: str
    headers: CIMultiDictProxy[str] = field(default_factory=lambda: CIMultiDictProxy(CIMultiDict()))
    body: bytes | None = None
    content_mode: ContentMode = ContentMode.JSON

    def __repr__(self) -> str:
        return _describe(self.method, self.url, self.headers, self.body)


class RequestBuilder:
    """Assemble a ``Request`` from a base URL plus per-call parts.

    Example:
        >>> builder = RequestBuilder("https://api.example.com")
        >>> builder.path = "/items"
        >>> builder.request().url
        'https://api.example.com/items'
    """

    def __init__(self, base_url: str) -> None:
        """Parse the base URL.

        Args:
            base_url: Absolute URL whose host (and query/fragment) every
                request reuses

        Raises:
            ConfigurationError: If the base URL cannot be parsed or has no host
        """
        try:
            components = urlsplit(base_url)
        except ValueError as e:
            raise ConfigurationError(f"Invalid base URL {base_url!r}: {e}") from e
        if not components.netloc:
            raise ConfigurationError(f"Invalid base URL {base_url!r}: missing host")

        self._components: SplitResult = components
        self.scheme: str = "https"
        self.method: str = "get"
        self.path: str = "/"
        self.body: bytes | None = None
        self.headers: Mapping[str, str] | None = None
        self.content_mode: ContentMode = ContentMode.JSON

    @classmethod
    def build(
        cls,
        method: str,
        base_url: str,
        path: str,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Request | None:
        """One-shot helper: configure a builder and return its request."""
        builder = cls(base_url)
        builder.method = method
        builder.path = path
        builder.body = body
        builder.headers = headers
        return builder.request()

    def url(self) -> str | None:
        """Compose the final URL, or ``None`` if the parts are not a valid URL."""
        if not _SCHEME_RE.match(self.scheme or ""):
            return None
        # With a host present the path must be empty or absolute
        if self.path and not self.path.startswith("/"):
            return None
        comps = self._components._replace(
            scheme=self.scheme,
            path=quote(self.path, safe=_PATH_SAFE),
        )
        return urlunsplit(comps)

    def _merged_headers(self) -> CIMultiDict[str]:
        merged: CIMultiDict[str] = CIMultiDict(self.content_mode.headers())
        for key, value in (self.headers or {}).items():
            merged[key] = value
        return merged

    def request(self) -> Request | None:
        """Freeze the builder into a ``Request``; ``None`` when the URL is invalid."""
        url = self.url()
        if url is None:
            return None
        return Request(
            method=self.method.upper(),
            url=url,
            headers=CIMultiDictProxy(self._merged_headers()),
            body=self.body,
            content_mode=self.content_mode,
        )

    def __repr__(self) -> str:
        return _describe(self.method, self.url(), self._merged_headers(), self.body)
