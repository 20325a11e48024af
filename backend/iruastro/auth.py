"""
Bearer token authentication.

Every computation endpoint requires ``Authorization: Bearer <token>``. The
expected token is handed to ``BearerTokenAuth`` when the app is built; the
check itself never reads process environment.
"""

import hmac
from functools import wraps
from typing import Optional

from flask import current_app, request

from .errors import Unauthorized

EXTENSION_KEY = "iruastro_auth"


def get_client_ip():
    """
    Get client IP address from request headers (supports proxies/load balancers).

    Checks X-Forwarded-For header (set by proxies/load balancers),
    then X-Real-IP header (set by nginx/other proxies),
    and falls back to request.remote_addr.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # "client, proxy1, proxy2": the first one is the original client
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return request.remote_addr or "unknown"


def log_auth_event(event_type, details=None):
    """
    Structured authentication event logger. Never logs the presented token.

    Args:
        event_type: Event name (e.g., 'auth_denied_missing')
        details: Optional dict with additional context
    """
    parts = [f"[{event_type}]"]
    if details:
        parts.append(" ".join(f"{k}={v}" for k, v in details.items()))
    parts.append(f"ip={get_client_ip()}")

    log_message = " ".join(parts)
    if event_type.startswith("auth_denied"):
        current_app.logger.warning(log_message)
    else:
        current_app.logger.debug(log_message)


class BearerTokenAuth:
    def __init__(self, token: str):
        if not token:
            raise ValueError("A non-empty access token is required")
        self._token = token.encode("utf-8")

    @staticmethod
    def extract(authorization: Optional[str]) -> Optional[str]:
        """Return the credential from an ``Authorization`` header value, if it is a bearer one."""
        if not authorization:
            return None
        scheme, _, credential = authorization.partition(" ")
        if scheme.lower() != "bearer" or not credential.strip():
            return None
        return credential.strip()

    def verify(self, authorization: Optional[str]) -> bool:
        credential = self.extract(authorization)
        if credential is None:
            return False
        return hmac.compare_digest(credential.encode("utf-8"), self._token)

    def check(self, authorization: Optional[str]) -> None:
        """Raise Unauthorized unless the header carries the expected token."""
        if self.extract(authorization) is None:
            log_auth_event("auth_denied_missing", details={"path": request.path})
            raise Unauthorized()
        if not self.verify(authorization):
            log_auth_event("auth_denied_invalid", details={"path": request.path})
            raise Unauthorized()
        log_auth_event("auth_ok", details={"path": request.path})


def require_bearer_token(view):
    """Route decorator enforcing the app's BearerTokenAuth."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        current_app.extensions[EXTENSION_KEY].check(request.headers.get("Authorization"))
        return view(*args, **kwargs)
    return wrapper
