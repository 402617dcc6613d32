"""Decoding of the backend's ``{error_code, message, data}`` response envelope."""

from __future__ import annotations

import json
from typing import Any

from taiyi.constants import ENVELOPE_DATA, ENVELOPE_ERROR_CODE, ENVELOPE_MESSAGE
from taiyi.errors import ProtocolError, TransportError
from taiyi.types import RawResponse


def _load_envelope(response: RawResponse) -> dict[str, Any]:
    if not response.ok:
        raise TransportError(
            f"Request failed with status {response.status}: {response.reason}",
            status=response.status,
            reason=response.reason,
        )

    try:
        payload = json.loads(response.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as error:
        raise ProtocolError(f"Malformed response envelope: {error}") from error

    if not isinstance(payload, dict):
        raise ProtocolError("Malformed response envelope: expected a JSON object")

    error_code = payload.get(ENVELOPE_ERROR_CODE)
    if not isinstance(error_code, int) or isinstance(error_code, bool):
        raise ProtocolError("Malformed response envelope: missing error_code")

    if error_code != 0:
        message = payload.get(ENVELOPE_MESSAGE, "")
        raise ProtocolError(str(message), error_code=error_code)

    return payload


def parse_response(response: RawResponse) -> str:
    """Validate ``response`` and return its ``data`` field, still JSON-encoded."""
    payload = _load_envelope(response)
    data = payload.get(ENVELOPE_DATA)
    if not isinstance(data, str):
        raise ProtocolError("Malformed response envelope: data must be a JSON string")
    return data


def parse_response_no_data(response: RawResponse) -> None:
    _load_envelope(response)


def decode_data(data: str) -> Any:
    try:
        return json.loads(data)
    except ValueError as error:
        raise ProtocolError(f"Malformed response data: {error}") from error
