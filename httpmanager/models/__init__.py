"""Resource models."""

from .resource import Resource, Restable, to_wire_key

__all__ = ["Resource", "Restable", "to_wire_key"]
