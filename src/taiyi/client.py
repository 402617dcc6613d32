"""Taiyi client facade: session lifecycle and domain queries."""

from __future__ import annotations

import logging
from typing import Any

from taiyi.access import parse_access
from taiyi.constants import (
    DEFAULT_DOMAIN_HOST,
    DEFAULT_DOMAIN_NAME,
    MAX_PORT,
    SCHEMAS_PATH,
    SDK_VERSION,
    SESSIONS_PATH,
    STATUS_PATH,
)
from taiyi.envelope import decode_data
from taiyi.errors import ConfigurationError, ProtocolError, UsageError
from taiyi.session import RequestDispatcher, api_base_url, establish_session
from taiyi.transport import urllib_transport
from taiyi.types import ChainStatus, Credential, SchemaQueryResult, Session, Transport

logger = logging.getLogger(__name__)


def _require_mapping(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ProtocolError(f"Malformed {what} response: expected a JSON object")
    return data


def _chain_status_from_dict(value: dict[str, Any]) -> ChainStatus:
    try:
        return ChainStatus(
            world_version=int(value.get("world_version", 0)),
            block_height=int(value.get("block_height", 0)),
            previous_block=str(value.get("previous_block", "")),
            genesis_block=str(value.get("genesis_block", "")),
            allocated_transaction_id=int(value.get("allocated_transaction_id", 0)),
        )
    except (TypeError, ValueError) as error:
        raise ProtocolError(f"Malformed status response: {error}") from error


def _schema_result_from_dict(value: dict[str, Any]) -> SchemaQueryResult:
    schemas = value.get("schemas") or []
    if not isinstance(schemas, list):
        raise ProtocolError("Malformed schemas response: schemas must be a list")
    try:
        return SchemaQueryResult(
            schemas=schemas,
            limit=int(value.get("limit", 0)),
            offset=int(value.get("offset", 0)),
            total=int(value.get("total", 0)),
        )
    except (TypeError, ValueError) as error:
        raise ProtocolError(f"Malformed schemas response: {error}") from error


class TaiyiClient:
    def __init__(self, credential: Credential, transport: Transport | None = None):
        self._credential = credential
        self._transport: Transport = transport or urllib_transport
        self._session: Session | None = None

    @property
    def access_id(self) -> str:
        return self._credential.access_id

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_connected(self) -> bool:
        return self._session is not None

    def get_version(self) -> str:
        return SDK_VERSION

    def connect(self, host: str, port: int) -> None:
        self.connect_to_domain(host, port, DEFAULT_DOMAIN_NAME)

    def connect_to_domain(self, host: str, port: int, domain_name: str) -> None:
        """Run the session handshake against ``host:port`` for ``domain_name``.

        The session is only replaced after the backend accepted the handshake;
        on failure the client keeps whatever session it had before.
        """
        if not host:
            host = DEFAULT_DOMAIN_HOST
        if not domain_name:
            raise ConfigurationError("Domain name is required")
        if not isinstance(port, int) or isinstance(port, bool) or port <= 0 or port > MAX_PORT:
            raise ConfigurationError(f"Invalid port {port}")

        self._session = establish_session(
            self._credential,
            self._transport,
            api_base=api_base_url(host, port),
            domain=domain_name,
        )

    def _dispatcher(self) -> RequestDispatcher:
        if self._session is None:
            raise UsageError("Client is not connected; call connect() first")
        return RequestDispatcher(self._credential, self._session, self._transport)

    def activate(self) -> None:
        dispatcher = self._dispatcher()
        dispatcher.dispatch_no_data("put", dispatcher.api_url(SESSIONS_PATH))
        logger.debug("session activated for domain %s", self._session.domain)

    def get_status(self) -> ChainStatus:
        """Return the current chain status of the connected domain."""
        dispatcher = self._dispatcher()
        data = dispatcher.dispatch("get", dispatcher.domain_url(STATUS_PATH))
        return _chain_status_from_dict(_require_mapping(decode_data(data), "status"))

    def query_schemas(self, offset: int, limit: int) -> SchemaQueryResult:
        """List schemas of the connected domain, starting at ``offset``, at most ``limit`` records."""
        dispatcher = self._dispatcher()
        condition = {
            "offset": offset,
            "limit": limit,
        }
        data = dispatcher.dispatch("post", dispatcher.domain_url(SCHEMAS_PATH), condition)
        return _schema_result_from_dict(_require_mapping(decode_data(data), "schemas"))


def new_client(access_id: str, private_key: bytes, transport: Transport | None = None) -> TaiyiClient:
    return TaiyiClient(Credential(access_id=access_id, private_key=private_key), transport=transport)


def new_client_from_access(data: dict[str, Any], transport: Transport | None = None) -> TaiyiClient:
    return TaiyiClient(parse_access(data), transport=transport)
