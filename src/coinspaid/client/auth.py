"""Request signing for the CoinsPaid API."""

import hashlib
import hmac


def sign(secret: str, body: bytes) -> str:
    """
    Sign a request body using HMAC-SHA512.

    The signature must be computed over the exact bytes sent on the wire;
    any re-serialization after signing invalidates it server-side.

    Args:
        secret: API secret
        body: Serialized request body

    Returns:
        Lowercase hex digest (128 characters)
    """
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha512).hexdigest()


def get_auth_headers(api_key: str, signature: str) -> dict[str, str]:
    """
    Get authentication headers for REST API requests.

    Args:
        api_key: API key identifying the caller
        signature: HMAC-SHA512 signature of the request body

    Returns:
        Dictionary of headers
    """
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "X-Processing-Key": api_key,
        "X-Processing-Signature": signature,
    }
