"""Deposit address models."""

from dataclasses import dataclass

from .fields import to_id


@dataclass(frozen=True)
class TakeAddressInput:
    """Parameters for requesting a deposit address."""

    foreign_id: str  # Your reference, echoed back by the server (e.g. "user-id:2048")
    currency: str  # ISO of the currency to receive funds in (e.g. "BTC")

    def to_api_payload(self) -> dict:
        """Convert to API request body."""
        return {"foreign_id": self.foreign_id, "currency": self.currency}


@dataclass(frozen=True)
class Address:
    """A deposit address assigned by the server."""

    id: int
    currency: str
    convert_to: str
    address: str
    tag: str
    foreign_id: str

    @classmethod
    def from_api(cls, data: dict) -> "Address":
        """Create Address from the ``data`` object of an API response."""
        return cls(
            id=to_id(data["id"]),
            currency=data["currency"],
            convert_to=data.get("convert_to") or "",
            address=data["address"],
            tag=data.get("tag") or "",
            foreign_id=data["foreign_id"],
        )
