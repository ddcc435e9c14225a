"""I/O layer (REST transport and client pipeline)."""

from .rest import AiohttpTransport, HttpClient, Transport, TransportConfig

__all__ = ["HttpClient", "Transport", "TransportConfig", "AiohttpTransport"]
