"""Crypto withdrawal models."""

from dataclasses import dataclass
from decimal import Decimal

from .fields import to_decimal, to_id


@dataclass(frozen=True)
class WithdrawCryptoInput:
    """Parameters for a crypto withdrawal."""

    foreign_id: str  # Unique reference in your system (e.g. "122929")
    amount: Decimal
    currency: str  # ISO of the currency to send (e.g. "BTC")
    address: str  # Destination address
    tag: str | None = None  # Tag (Ripple, BNB) or memo (Bitshares, EOS)

    def to_api_payload(self) -> dict:
        """
        Convert to API request body.

        The API documents ``amount`` as a string (e.g. "3500"), so it is sent
        as a plain decimal string and no precision is lost to float rounding.

        Raises:
            ValueError: amount is not a finite number
        """
        amount = self.amount if isinstance(self.amount, Decimal) else Decimal(str(self.amount))
        if not amount.is_finite():
            raise ValueError(f"amount must be finite, got {self.amount!r}")

        payload = {
            "foreign_id": self.foreign_id,
            "amount": format(amount, "f"),
            "currency": self.currency,
            "address": self.address,
        }

        if self.tag:
            payload["tag"] = self.tag

        return payload


@dataclass(frozen=True)
class WithdrawCryptoPayload:
    """A withdrawal accepted by the server."""

    id: int
    foreign_id: str
    type: str
    status: str
    amount: Decimal | None
    sender_currency: str
    sender_amount: Decimal | None
    receiver_currency: str
    receiver_amount: Decimal | None

    @classmethod
    def from_api(cls, data: dict) -> "WithdrawCryptoPayload":
        """Create WithdrawCryptoPayload from the ``data`` object of an API response."""
        return cls(
            id=to_id(data["id"]),
            foreign_id=data["foreign_id"],
            type=data.get("type", ""),
            status=data["status"],
            amount=to_decimal(data.get("amount")),
            sender_currency=data.get("sender_currency", ""),
            sender_amount=to_decimal(data.get("sender_amount")),
            receiver_currency=data.get("receiver_currency", ""),
            receiver_amount=to_decimal(data.get("receiver_amount")),
        )
