"""REST request/response pipeline."""

from .callbacks import Completion, dispatch
from .http_client import HttpClient
from .request_builder import Request, RequestBuilder
from .response import HttpResponse
from .transport import AiohttpTransport, Transport, TransportConfig, TransportResponse

__all__ = [
    "HttpClient",
    "HttpResponse",
    "Request",
    "RequestBuilder",
    "Transport",
    "TransportConfig",
    "TransportResponse",
    "AiohttpTransport",
    "Completion",
    "dispatch",
]
