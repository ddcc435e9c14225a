"""Core components."""

from .enums import ContentMode, StatusClass
from .exceptions import (
    ClientError,
    ConfigurationError,
    DecodingError,
    HttpManagerError,
    InvalidRequestError,
    InvalidResponseError,
    RequestError,
    ResponseError,
    ServerError,
    Titleable,
    TransportError,
)
from .outcome import Failure, Outcome, Success, catching
from .status import StatusCode, classify

__all__ = [
    "ContentMode",
    "StatusClass",
    "StatusCode",
    "classify",
    # Outcome
    "Outcome",
    "Success",
    "Failure",
    "catching",
    # Errors
    "Titleable",
    "HttpManagerError",
    "ConfigurationError",
    "RequestError",
    "InvalidRequestError",
    "ResponseError",
    "InvalidResponseError",
    "ClientError",
    "ServerError",
    "TransportError",
    "DecodingError",
]
