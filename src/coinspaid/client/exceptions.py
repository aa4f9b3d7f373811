"""Exceptions raised by the CoinsPaid client."""


class CoinspaidError(Exception):
    """Base exception for all client errors."""


class ClientConfigError(CoinspaidError):
    """Raised when the client is constructed with missing credentials or a bad endpoint."""


class EncodingError(CoinspaidError):
    """Raised when a request input cannot be serialized to JSON."""


class TransportError(CoinspaidError):
    """Raised on network, DNS or timeout failures.

    The underlying aiohttp/asyncio exception is available as ``__cause__``.
    """


class ResponseError(CoinspaidError):
    """An error tied to an HTTP response from the API."""

    def __init__(self, message: str, *, status: int, method: str, url: str, body: str = ""):
        super().__init__(message)
        self.message = message
        self.status = status
        self.method = method
        self.url = url
        self.body = body


class APIError(ResponseError):
    """Non-2xx, non-400 response carrying ``{"error": ..., "code": ...}``."""

    def __init__(self, message: str, code: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.code = code

    def __str__(self) -> str:
        return f"{self.method} {self.url} - {self.status} {self.message} {self.code}"


class AuthenticationError(APIError):
    """Credentials were rejected (HTTP 401/403)."""


class ValidationError(ResponseError):
    """HTTP 400 response carrying a field -> message mapping."""

    def __init__(self, errors: dict[str, str], message: str = "", **kwargs):
        super().__init__(message or "validation failed", **kwargs)
        self.errors = errors

    def __str__(self) -> str:
        return f"{self.method} {self.url} - {self.status} {self.errors}"


class ProtocolError(ResponseError):
    """A 2xx response whose body does not match the expected envelope."""

    def __str__(self) -> str:
        return f"{self.method} {self.url} - {self.status} {self.message}"
