"""Taiyi Python SDK: signed sessions and domain queries against a Taiyi backend."""

from taiyi.access import DEFAULT_ACCESS_PATH, load_access, parse_access
from taiyi.client import TaiyiClient, new_client, new_client_from_access
from taiyi.constants import SDK_VERSION
from taiyi.envelope import decode_data, parse_response, parse_response_no_data
from taiyi.errors import (
    ConfigurationError,
    ProtocolError,
    SigningError,
    TaiyiError,
    TransportError,
    UsageError,
)
from taiyi.session import RequestDispatcher, establish_session
from taiyi.signing import body_digest, canonical_json, new_nonce, sign_content
from taiyi.transport import urllib_transport
from taiyi.types import (
    ChainStatus,
    Credential,
    RawResponse,
    SchemaQueryResult,
    Session,
)

__all__ = [
    "DEFAULT_ACCESS_PATH",
    "ChainStatus",
    "ConfigurationError",
    "Credential",
    "ProtocolError",
    "RawResponse",
    "RequestDispatcher",
    "SchemaQueryResult",
    "Session",
    "SigningError",
    "TaiyiClient",
    "TaiyiError",
    "TransportError",
    "UsageError",
    "body_digest",
    "canonical_json",
    "decode_data",
    "establish_session",
    "load_access",
    "new_client",
    "new_client_from_access",
    "new_nonce",
    "parse_access",
    "parse_response",
    "parse_response_no_data",
    "sign_content",
    "urllib_transport",
]

__version__ = SDK_VERSION
