"""Protocol constants shared by the Taiyi client and its helpers."""

from __future__ import annotations

SDK_VERSION = "0.1.0"
API_VERSION = "1"

PROJECT_NAME = "Taiyi"
HEADER_SESSION = f"{PROJECT_NAME}-Session"
HEADER_TIMESTAMP = f"{PROJECT_NAME}-Timestamp"
HEADER_SIGNATURE = f"{PROJECT_NAME}-Signature"
HEADER_SIGNATURE_ALGORITHM = f"{PROJECT_NAME}-SignatureAlgorithm"
HEADER_CONTENT_TYPE = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

SIGNATURE_ALGORITHM_ED25519 = "ed25519"
KEY_ENCODE_ED25519_HEX = "ed25519-hex"
DEFAULT_KEY_ENCODE_METHOD = KEY_ENCODE_ED25519_HEX

DEFAULT_DOMAIN_NAME = "system"
DEFAULT_DOMAIN_HOST = "localhost"
NONCE_LENGTH = 16
MAX_PORT = 0xFFFF

SESSIONS_PATH = "/sessions/"
STATUS_PATH = "/status"
SCHEMAS_PATH = "/schemas/"

# Methods whose signed "body" field carries a digest of the payload.
BODY_SIGNED_METHODS = frozenset({"post", "put", "delete", "patch"})

ENVELOPE_ERROR_CODE = "error_code"
ENVELOPE_MESSAGE = "message"
ENVELOPE_DATA = "data"
