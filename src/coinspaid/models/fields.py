"""Field decoders shared by the response models."""

from decimal import Decimal


def to_id(value) -> int:
    """Normalize a server identifier sent as a JSON number or string.

    Raises:
        ValueError: value is a bool, a non-integral float or not numeric
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid id: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"invalid id: {value!r}")
        return int(value)
    return int(str(value).strip())


def to_decimal(value) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value))
