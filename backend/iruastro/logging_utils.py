"""
Logging Utilities

Helpers that strip credentials and birth details before request data
reaches the logs.
"""

import json
from typing import Any, Dict

from flask import Request


# Keys that should never be logged
SENSITIVE_KEYS = {
    "password", "secret", "token", "api_key", "apikey", "auth",
    "authorization", "cookie", "session", "bearer",
}

# Birth data identifies a person, so it is redacted
PII_KEYS = {
    "dob", "time", "birth", "name", "email", "phone",
}


def sanitize_dict(data: Dict[str, Any], redact_pii: bool = True) -> Dict[str, Any]:
    """
    Sanitize a dictionary by removing/redacting sensitive fields.

    Example:
        >>> sanitize_dict({"dob": "1990-06-15", "token": "x", "language": "si"})
        {"dob": "[REDACTED]", "language": "si"}
    """
    if not isinstance(data, dict):
        return data

    sanitized = {}
    for key, value in data.items():
        key_lower = str(key).lower()

        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            continue

        # Exact match so "timezone" is not mistaken for "time"
        if redact_pii and key_lower in PII_KEYS:
            sanitized[key] = "[REDACTED]"
            continue

        if isinstance(value, dict):
            sanitized[key] = sanitize_dict(value, redact_pii)
        elif isinstance(value, list):
            sanitized[key] = [
                sanitize_dict(item, redact_pii) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized


def sanitize_request_data(request: Request, max_length: int = 500) -> str:
    """Sanitized, truncated JSON body (or a content summary) for logging."""
    if request.is_json:
        data = request.get_json(silent=True)
        if isinstance(data, dict):
            result = json.dumps(sanitize_dict(data), separators=(',', ':'), ensure_ascii=False)
        elif data is None:
            result = "No JSON data"
        else:
            result = f"JSON {type(data).__name__}"
    else:
        result = f"Content-Type: {request.content_type or 'none'}, Length: {request.content_length or 0}"

    if len(result) > max_length:
        result = result[:max_length] + "..."

    return result


def sanitize_headers(headers) -> Dict[str, str]:
    """Keep only a short allow-list of non-sensitive headers."""
    safe_headers = {
        "content-type", "content-length", "accept",
        "user-agent", "referer", "origin",
    }

    sanitized = {}
    for key, value in headers.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            continue

        if key_lower in safe_headers:
            if key_lower == "user-agent" and len(value) > 100:
                sanitized[key] = value[:100] + "..."
            else:
                sanitized[key] = value

    return sanitized
