"""HTTP response interpretation.

Combines the status classification with payload presence: a non-empty
body travels on the success path, an absent or empty body becomes ``None``,
and any failure from the status discards the payload.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import StatusClass
from ...core.outcome import Outcome
from ...core.status import StatusCode


@dataclass(frozen=True)
class HttpResponse:
    """Raw transport status wrapped with its classification.

    A missing transport response is treated as a default response whose
    status code is 0 (classified as UNKNOWN).
    """

    status_code: int = 0

    @classmethod
    def from_status(cls, status_code: int | None) -> HttpResponse:
        return cls(status_code=status_code if status_code is not None else 0)

    @property
    def status(self) -> StatusCode:
        return StatusCode(self.status_code)

    @property
    def status_class(self) -> StatusClass:
        return self.status.status_class

    def result(self, payload: bytes | None) -> Outcome[bytes | None]:
        """Map the status result onto the payload."""
        if payload:
            return self.status.result().map(lambda _: payload)
        return self.status.result().map(lambda _: None)
