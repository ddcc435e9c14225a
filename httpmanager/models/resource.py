"""Resource capability and wire conventions."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Protocol, get_args, runtime_checkable

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

# Underscore only at a lower/digit -> upper boundary; digits never split
_CASE_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
# Date part of an ISO-8601 timestamp
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")


def to_wire_key(name: str) -> str:
    """Convert an in-memory field name to its snake_case wire key.

    Example:
        >>> to_wire_key("createdAt"), to_wire_key("line1"), to_wire_key("created_at")
        ('created_at', 'line1', 'created_at')
    """
    return _CASE_BOUNDARY_RE.sub("_", name).lower()


def _is_datetime(annotation: Any) -> bool:
    if annotation is datetime:
        return True
    return any(arg is datetime for arg in get_args(annotation))


@runtime_checkable
class Restable(Protocol):
    """A resource exposed through ``RestClient``: pydantic-validatable with a stable ``id``."""

    id: Any


class Resource(BaseModel):
    """Base model carrying the fixed wire conventions.

    - Field names are snake_case on the wire whatever their in-memory
      spelling (``createdAt`` and ``created_at`` both map to ``created_at``,
      ``line1`` stays ``line1``)
    - Datetimes decode only from ISO-8601 strings and encode to ISO-8601
    - Unknown wire fields are ignored
    """

    model_config = ConfigDict(
        alias_generator=to_wire_key,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def validate_iso_datetimes(cls, v: Any, info: ValidationInfo) -> Any:
        """Reject epoch numbers and other non-ISO input for datetime fields."""
        field = cls.model_fields.get(info.field_name) if info.field_name else None
        if field is None or not _is_datetime(field.annotation):
            return v
        if v is None or isinstance(v, datetime):
            return v
        if isinstance(v, str) and _ISO_DATE_RE.match(v):
            return v
        raise ValueError(f"{info.field_name} must be an ISO-8601 timestamp")
