"""Shared SDK datatypes for the Taiyi Python SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

HeaderList = List[Tuple[str, str]]


@dataclass(frozen=True)
class Credential:
    access_id: str
    private_key: bytes = field(repr=False)


@dataclass(frozen=True)
class Session:
    domain: str
    api_base: str
    nonce: str = field(repr=False)
    session_id: str
    timeout_seconds: int
    local_ip: str


@dataclass(frozen=True)
class RawResponse:
    status: int
    reason: str
    body: bytes

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


@dataclass(frozen=True)
class ChainStatus:
    world_version: int
    block_height: int
    previous_block: str
    genesis_block: str
    allocated_transaction_id: int


@dataclass(frozen=True)
class SchemaQueryResult:
    schemas: list[Any]
    limit: int
    offset: int
    total: int


# (method, url, headers, body) -> RawResponse
Transport = Callable[[str, str, HeaderList, Optional[bytes]], RawResponse]
