"""Canonical signature content, body digests and ed25519 signing for Taiyi requests."""

from __future__ import annotations

import base64
import hashlib
import json
import secrets
import string
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlsplit

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey

from taiyi.constants import BODY_SIGNED_METHODS, NONCE_LENGTH, SIGNATURE_ALGORITHM_ED25519
from taiyi.errors import SigningError

_NONCE_ALPHABET = string.ascii_letters + string.digits


def new_nonce(length: int = NONCE_LENGTH) -> str:
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(length))


def iso_timestamp(now: datetime | None = None) -> str:
    """Render ``now`` (default: current time) as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    value = now or datetime.now(timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def canonical_json(value: Any) -> str:
    # Keys stay in insertion order; the backend rebuilds the same compact rendering.
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def body_digest(body: bytes) -> str:
    return base64.b64encode(hashlib.sha256(body).digest()).decode("ascii")


def sign_content(content: dict[str, Any], private_key: bytes) -> str:
    message = canonical_json(content).encode("utf-8")
    try:
        signature = SigningKey(private_key).sign(message).signature
    except (CryptoError, TypeError, ValueError) as error:
        raise SigningError(f"Failed to sign request content: {error}") from error
    return base64.b64encode(signature).decode("ascii")


def handshake_content(access_id: str, timestamp: str, nonce: str) -> dict[str, Any]:
    return {
        "access": access_id,
        "timestamp": timestamp,
        "nonce": nonce,
        "signature_algorithm": SIGNATURE_ALGORITHM_ED25519,
    }


def request_content(
    *,
    session_id: str,
    method: str,
    url: str,
    body: bytes | None,
    access_id: str,
    timestamp: str,
    nonce: str,
) -> dict[str, Any]:
    """Build the authenticated signature content for one in-session request.

    ``body`` is the exact payload that will be transmitted. The signed ``body``
    field is its digest for body-carrying methods, and the empty string when
    nothing was hashed (GET-style calls, or no payload at all). The empty
    string is never the digest of an empty body.
    """
    normalized_method = method.lower()
    digest = ""
    if normalized_method in BODY_SIGNED_METHODS and body is not None:
        digest = body_digest(body)

    return {
        "id": session_id,
        "method": normalized_method,
        "url": urlsplit(url).path,
        "body": digest,
        "access": access_id,
        "timestamp": timestamp,
        "nonce": nonce,
        "signature_algorithm": SIGNATURE_ALGORITHM_ED25519,
    }
