"""Client modules for the CoinsPaid REST API."""

from .auth import get_auth_headers, sign
from .exceptions import (
    APIError,
    AuthenticationError,
    ClientConfigError,
    CoinspaidError,
    EncodingError,
    ProtocolError,
    ResponseError,
    TransportError,
    ValidationError,
)
from .response import classify_response
from .rest import CoinspaidClient

__all__ = [
    "CoinspaidClient",
    "classify_response",
    "get_auth_headers",
    "sign",
    "APIError",
    "AuthenticationError",
    "ClientConfigError",
    "CoinspaidError",
    "EncodingError",
    "ProtocolError",
    "ResponseError",
    "TransportError",
    "ValidationError",
]
