"""HMAC request signing for off-chain trading services.

The signed message is ``timestamp:METHOD:path:body``; the service receives
the timestamp and the hex digest in headers and bounds replay itself.
"""

from __future__ import annotations

import hashlib
import hmac
import os
import time
from typing import Protocol

TIMESTAMP_HEADER = "x-timestamp"
SIGNATURE_HEADER = "x-signature"


class SecretProvider(Protocol):
    """Capability that resolves a secret by id at call time."""

    def get_secret(self, secret_id: str) -> str | None:
        """Return the secret value, or None if it is not available."""
        ...


class EnvSecretProvider:
    """Secrets read from environment variables, optionally prefixed."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix

    def get_secret(self, secret_id: str) -> str | None:
        return os.environ.get(f"{self.prefix}{secret_id}") or None


class StaticSecretProvider:
    """Secrets from a fixed mapping (local runs and tests)."""

    def __init__(self, secrets: dict[str, str] | None = None):
        self.secrets = dict(secrets or {})

    def get_secret(self, secret_id: str) -> str | None:
        return self.secrets.get(secret_id)


def signing_message(method: str, path: str, body: str, timestamp: str) -> str:
    """Colon-delimited message covered by the signature."""
    return f"{timestamp}:{method.upper()}:{path}:{body}"


def sign_request(secret: str, method: str, path: str, body: str, timestamp: str) -> str:
    """HMAC-SHA256 hex digest of a request.

    Args:
        secret: Shared HMAC secret
        method: HTTP method (case-insensitive)
        path: Request path, e.g. "/v1/positions/open"
        body: Exact request body string that will be sent
        timestamp: Timestamp string sent in the x-timestamp header

    Returns:
        Lowercase hex digest
    """
    return hmac.new(
        secret.encode("utf-8"),
        signing_message(method, path, body, timestamp).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def signed_headers(
    secret: str,
    method: str,
    path: str,
    body: str,
    timestamp: str | None = None,
) -> dict[str, str]:
    """JSON request headers carrying the timestamp and signature.

    The timestamp defaults to the current time in milliseconds.
    """
    if timestamp is None:
        timestamp = str(int(time.time() * 1000))
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        TIMESTAMP_HEADER: timestamp,
        SIGNATURE_HEADER: sign_request(secret, method, path, body, timestamp),
    }


__all__ = [
    "SecretProvider",
    "EnvSecretProvider",
    "StaticSecretProvider",
    "signing_message",
    "sign_request",
    "signed_headers",
    "TIMESTAMP_HEADER",
    "SIGNATURE_HEADER",
]
