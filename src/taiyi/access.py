"""Loading of Taiyi access credentials from JSON access records."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from nacl.encoding import HexEncoder

from taiyi.constants import DEFAULT_KEY_ENCODE_METHOD
from taiyi.errors import ConfigurationError
from taiyi.types import Credential

DEFAULT_ACCESS_PATH = str(Path.home() / ".taiyi" / "access.json")


def _get_access_path(explicit_path: str | None = None) -> str:
    return explicit_path or os.environ.get("TAIYI_ACCESS_FILE") or DEFAULT_ACCESS_PATH


def _decode_hex_key(value: Any) -> bytes:
    if not isinstance(value, str) or not value:
        raise ConfigurationError("Invalid private key format: expected a hex string")
    try:
        return HexEncoder.decode(value.encode("ascii"))
    except (UnicodeEncodeError, ValueError) as error:
        raise ConfigurationError("Invalid private key format: expected a hex string") from error


def parse_access(data: dict[str, Any]) -> Credential:
    """Turn an ``{id, encode_method, private_key}`` access record into a credential."""
    if not isinstance(data, dict):
        raise ConfigurationError("Access record must be a JSON object")

    encode_method = data.get("encode_method")
    if encode_method != DEFAULT_KEY_ENCODE_METHOD:
        raise ConfigurationError(f"Unsupported key encode method: {encode_method}")

    access_id = data.get("id")
    if not isinstance(access_id, str) or not access_id:
        raise ConfigurationError("Access record is missing an id")

    return Credential(access_id=access_id, private_key=_decode_hex_key(data.get("private_key")))


def load_access(path: str | None = None) -> Credential:
    access_path = Path(_get_access_path(path))
    if not access_path.exists():
        raise ConfigurationError(f"Taiyi access file not found at {access_path}")

    try:
        raw = json.loads(access_path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as error:
        raise ConfigurationError(f"Failed to parse access file {access_path}: {error}") from error

    return parse_access(raw)
