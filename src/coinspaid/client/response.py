"""Classification of raw API responses into data or typed errors."""

import json
from typing import Any

from .exceptions import (
    APIError,
    AuthenticationError,
    ProtocolError,
    ValidationError,
)


def _parse_json(body: str) -> Any:
    """Parse a body, returning None when it is empty or not JSON."""
    if not body.strip():
        return None
    try:
        return json.loads(body)
    except json.JSONDecodeError:
        return None


def _field_errors(raw: dict) -> dict[str, str]:
    errors = {}
    for field, message in raw.items():
        if isinstance(message, list):
            # Some endpoints return a list of messages per field
            message = " ".join(str(m) for m in message)
        errors[str(field)] = str(message)
    return errors


def classify_response(status: int, body: str, method: str, url: str) -> dict[str, Any]:
    """
    Classify a response by HTTP status and decode its envelope.

    Args:
        status: HTTP status code
        body: Response body text
        method: Request method, kept for error context
        url: Request URL, kept for error context

    Returns:
        The inner ``data`` object of a successful response

    Raises:
        ProtocolError: 2xx response without a ``{"data": {...}}`` envelope
        ValidationError: HTTP 400
        AuthenticationError: HTTP 401/403
        APIError: any other non-2xx status
    """
    context = {"status": status, "method": method, "url": url, "body": body}
    parsed = _parse_json(body)

    if 200 <= status <= 299:
        if not isinstance(parsed, dict):
            raise ProtocolError("response body is not a JSON object", **context)
        data = parsed.get("data")
        if not isinstance(data, dict):
            raise ProtocolError("response body has no 'data' object", **context)
        return data

    if status == 400:
        if isinstance(parsed, dict) and isinstance(parsed.get("errors"), dict):
            raise ValidationError(_field_errors(parsed["errors"]), **context)
        raise ValidationError({}, message=body, **context)

    message, code = body, ""
    if isinstance(parsed, dict) and isinstance(parsed.get("error"), str):
        message = parsed["error"]
        code = parsed.get("code")
        code = "" if code is None else str(code)

    error_cls = AuthenticationError if status in (401, 403) else APIError
    raise error_cls(message, code, **context)
