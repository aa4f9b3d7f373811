"""Data models."""

from .address import Address, TakeAddressInput
from .withdrawal import WithdrawCryptoInput, WithdrawCryptoPayload

__all__ = [
    "Address",
    "TakeAddressInput",
    "WithdrawCryptoInput",
    "WithdrawCryptoPayload",
]
