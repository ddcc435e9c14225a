"""Core enumerations shared across the request/response pipeline.

Key Types:
    - StatusClass: Coarse category derived from a numeric HTTP status code
    - ContentMode: Named bundle of Accept/Content-Type header values
"""

from enum import Enum, IntEnum


class StatusClass(IntEnum):
    """Coarse HTTP status category.

    Integer values are stable and ordered by status family, with UNKNOWN
    reserved for codes outside every recognized table.
    """

    UNKNOWN = 0
    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5


class ContentMode(str, Enum):
    """Wire payload format negotiated through request headers."""

    JSON = "json"

    @property
    def accept(self) -> str:
        """Value for the Accept header."""
        return _ACCEPT[self]

    @property
    def content_type(self) -> str:
        """Value for the Content-Type header."""
        return _CONTENT_TYPE[self]

    def headers(self) -> dict[str, str]:
        """Fixed header pair for this content mode."""
        return {"Accept": self.accept, "Content-Type": self.content_type}


_ACCEPT = {ContentMode.JSON: "application/json"}
_CONTENT_TYPE = {ContentMode.JSON: "application/json"}
