"""Status-code classification.

Maps a raw numeric HTTP status onto a ``StatusClass`` through fixed tables
and turns the class into an ``Outcome``. Only the enumerated 2xx codes are
successes; informational and redirection codes are reported as
``InvalidResponseError`` because this layer never follows redirects.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import StatusClass
from .exceptions import ClientError, InvalidResponseError, ServerError
from .outcome import Failure, Outcome, Success

INFORMATIONAL_CODES = frozenset({100, 101, 102})
SUCCESS_CODES = frozenset({200, 201, 202, 203, 204, 205, 206, 207, 208, 226})
REDIRECTION_CODES = frozenset({300, 301, 302, 303, 304, 305, 306, 307, 308})
CLIENT_ERROR_CODES = frozenset(
    {
        400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412,
        413, 414, 415, 416, 417, 418, 421, 422, 423, 424, 426, 428, 429, 431, 451,
    }
)  # fmt: skip
SERVER_ERROR_CODES = frozenset({500, 501, 502, 503, 504, 505, 506, 507, 510, 511})

_TABLES = (
    (INFORMATIONAL_CODES, StatusClass.INFORMATIONAL),
    (SUCCESS_CODES, StatusClass.SUCCESS),
    (REDIRECTION_CODES, StatusClass.REDIRECTION),
    (CLIENT_ERROR_CODES, StatusClass.CLIENT_ERROR),
    (SERVER_ERROR_CODES, StatusClass.SERVER_ERROR),
)


def classify(raw_code: int | None) -> StatusClass:
    """Classify a raw status code; ``None`` (no response) is UNKNOWN."""
    if raw_code is None:
        return StatusClass.UNKNOWN
    for codes, status_class in _TABLES:
        if raw_code in codes:
            return status_class
    return StatusClass.UNKNOWN


@dataclass(frozen=True)
class StatusCode:
    """A raw status code paired with its derived class."""

    raw: int

    @property
    def status_class(self) -> StatusClass:
        return classify(self.raw)

    def result(self) -> Outcome[int]:
        """Success with the raw code for 2xx, a typed failure otherwise."""
        status_class = self.status_class
        if status_class is StatusClass.SUCCESS:
            return Success(self.raw)
        if status_class is StatusClass.CLIENT_ERROR:
            return Failure(ClientError(f"Client error (HTTP {self.raw})"))
        if status_class is StatusClass.SERVER_ERROR:
            return Failure(ServerError(f"Server error (HTTP {self.raw})"))
        return Failure(InvalidResponseError(f"Invalid response (HTTP {self.raw})"))
