"""HttpManager - typed REST client with status-driven error classification."""

from .clients import RestClient
from .core import (
    ClientError,
    ConfigurationError,
    ContentMode,
    DecodingError,
    Failure,
    HttpManagerError,
    InvalidRequestError,
    InvalidResponseError,
    Outcome,
    ServerError,
    StatusClass,
    StatusCode,
    Success,
    Titleable,
    TransportError,
    classify,
)
from .io.rest import (
    AiohttpTransport,
    HttpClient,
    HttpResponse,
    Request,
    RequestBuilder,
    Transport,
    TransportConfig,
    TransportResponse,
    dispatch,
)
from .models import Resource, Restable

__version__ = "0.1.0"

__all__ = [
    # Clients
    "HttpClient",
    "RestClient",
    # Pipeline
    "Request",
    "RequestBuilder",
    "HttpResponse",
    "Transport",
    "TransportConfig",
    "TransportResponse",
    "AiohttpTransport",
    "dispatch",
    # Models
    "Resource",
    "Restable",
    # Core
    "ContentMode",
    "StatusClass",
    "StatusCode",
    "classify",
    "Outcome",
    "Success",
    "Failure",
    # Errors
    "Titleable",
    "HttpManagerError",
    "ConfigurationError",
    "InvalidRequestError",
    "InvalidResponseError",
    "ClientError",
    "ServerError",
    "TransportError",
    "DecodingError",
]
