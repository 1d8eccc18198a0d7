"""Redaction of sensitive data before request bodies reach debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "secret",
    "password",
    "current",
    "token",
    "refresh_token",
    "authorization",
    "api_key",
    "certificate_key",
    "private_key",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_payload(payload: Any) -> Any:
    """Recursively redact sensitive keys from a request or response body.

    Creates a copy - the original payload is never mutated. Non-container
    values are returned as they are.

    Args:
        payload: The JSON-compatible value to redact sensitive values from.

    Returns:
        A new value with sensitive values replaced by "[REDACTED]".
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = redact_payload(value)
        return result
    elif isinstance(payload, list):
        return [redact_payload(item) for item in payload]
    else:
        return payload
