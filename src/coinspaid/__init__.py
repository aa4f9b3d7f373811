"""
Async client for the CoinsPaid cryptocurrency processing API.
"""

from .client import (
    APIError,
    AuthenticationError,
    ClientConfigError,
    CoinspaidClient,
    CoinspaidError,
    EncodingError,
    ProtocolError,
    ResponseError,
    TransportError,
    ValidationError,
)
from .models import Address, TakeAddressInput, WithdrawCryptoInput, WithdrawCryptoPayload
from .utils.config import Config

__version__ = "0.1.0"

__all__ = [
    "CoinspaidClient",
    "Config",
    "Address",
    "TakeAddressInput",
    "WithdrawCryptoInput",
    "WithdrawCryptoPayload",
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
