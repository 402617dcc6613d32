"""Session handshake and authenticated request dispatch."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from taiyi.constants import (
    API_VERSION,
    CONTENT_TYPE_JSON,
    HEADER_CONTENT_TYPE,
    HEADER_SESSION,
    HEADER_SIGNATURE,
    HEADER_SIGNATURE_ALGORITHM,
    HEADER_TIMESTAMP,
    SESSIONS_PATH,
    SIGNATURE_ALGORITHM_ED25519,
)
from taiyi.envelope import decode_data, parse_response, parse_response_no_data
from taiyi.errors import ProtocolError
from taiyi.signing import (
    canonical_json,
    handshake_content,
    iso_timestamp,
    new_nonce,
    request_content,
    sign_content,
)
from taiyi.types import Credential, HeaderList, RawResponse, Session, Transport

logger = logging.getLogger(__name__)


def api_base_url(host: str, port: int) -> str:
    return f"http://{host}:{port}/api/v{API_VERSION}"


def _encode_payload(payload: Any | None) -> bytes | None:
    if payload is None:
        return None
    return canonical_json(payload).encode("utf-8")


def _session_from_data(data: Any, *, domain: str, api_base: str, nonce: str) -> Session:
    if not isinstance(data, dict):
        raise ProtocolError("Malformed session response: expected a JSON object")

    session_id = data.get("session")
    timeout = data.get("timeout")
    address = data.get("address")
    if not isinstance(session_id, str) or not session_id:
        raise ProtocolError("Malformed session response: missing session id")
    if not isinstance(timeout, int) or isinstance(timeout, bool):
        raise ProtocolError("Malformed session response: timeout must be an integer")
    if not isinstance(address, str):
        raise ProtocolError("Malformed session response: address must be a string")

    return Session(
        domain=domain,
        api_base=api_base,
        nonce=nonce,
        session_id=session_id,
        timeout_seconds=timeout,
        local_ip=address,
    )


def establish_session(
    credential: Credential,
    transport: Transport,
    *,
    api_base: str,
    domain: str,
) -> Session:
    """Run the session handshake and return the negotiated session.

    The signed content proves possession of the private key and freshness; it
    deliberately differs from the transmitted ``{id, nonce}`` body and carries
    no session id. The nonce minted here is reused for the session's lifetime.
    """
    nonce = new_nonce()
    timestamp = iso_timestamp()
    signature = sign_content(
        handshake_content(credential.access_id, timestamp, nonce),
        credential.private_key,
    )
    body = _encode_payload({"id": credential.access_id, "nonce": nonce})
    headers: HeaderList = [
        (HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON),
        (HEADER_TIMESTAMP, timestamp),
        (HEADER_SIGNATURE_ALGORITHM, SIGNATURE_ALGORITHM_ED25519),
        (HEADER_SIGNATURE, signature),
    ]

    response = transport("POST", api_base + SESSIONS_PATH, headers, body)
    session = _session_from_data(
        decode_data(parse_response(response)),
        domain=domain,
        api_base=api_base,
        nonce=nonce,
    )
    logger.debug(
        "session established on %s for domain %s (timeout %ss)",
        api_base,
        domain,
        session.timeout_seconds,
    )
    return session


class RequestDispatcher:
    """Signs and issues in-session requests; never mutates the session."""

    def __init__(self, credential: Credential, session: Session, transport: Transport):
        self._credential = credential
        self._session = session
        self._transport = transport

    def api_url(self, path: str) -> str:
        return self._session.api_base + path

    def domain_url(self, path: str) -> str:
        domain = quote(self._session.domain, safe="")
        return f"{self._session.api_base}/domains/{domain}{path}"

    def _send(self, method: str, url: str, payload: Any | None) -> RawResponse:
        body = _encode_payload(payload)
        timestamp = iso_timestamp()
        content = request_content(
            session_id=self._session.session_id,
            method=method,
            url=url,
            body=body,
            access_id=self._credential.access_id,
            timestamp=timestamp,
            nonce=self._session.nonce,
        )
        signature = sign_content(content, self._credential.private_key)

        headers: HeaderList = []
        if body is not None:
            headers.append((HEADER_CONTENT_TYPE, CONTENT_TYPE_JSON))
        headers.extend([
            (HEADER_SESSION, self._session.session_id),
            (HEADER_TIMESTAMP, timestamp),
            (HEADER_SIGNATURE_ALGORITHM, SIGNATURE_ALGORITHM_ED25519),
            (HEADER_SIGNATURE, signature),
        ])

        logger.debug("dispatching %s %s", method.upper(), content["url"])
        return self._transport(method.upper(), url, headers, body)

    def dispatch(self, method: str, url: str, payload: Any | None = None) -> str:
        return parse_response(self._send(method, url, payload))

    def dispatch_no_data(self, method: str, url: str, payload: Any | None = None) -> None:
        parse_response_no_data(self._send(method, url, payload))
