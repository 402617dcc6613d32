from __future__ import annotations

import json
from dataclasses import dataclass, field

import pytest
from nacl.signing import SigningKey

from taiyi import RawResponse, new_client


def envelope(data: object = None, *, error_code: int = 0, message: str = "") -> RawResponse:
    payload = {
        "error_code": error_code,
        "message": message,
        "data": json.dumps(data) if data is not None else "",
    }
    return RawResponse(status=200, reason="OK", body=json.dumps(payload).encode("utf-8"))


@dataclass
class RecordedRequest:
    method: str
    url: str
    headers: list[tuple[str, str]]
    body: bytes | None

    def header(self, name: str) -> str | None:
        for key, value in self.headers:
            if key == name:
                return value
        return None


@dataclass
class FakeBackend:
    session_data: dict = field(
        default_factory=lambda: {"session": "abc", "timeout": 30, "address": "10.0.0.2"},
    )
    responses: dict[tuple[str, str], RawResponse] = field(default_factory=dict)
    requests: list[RecordedRequest] = field(default_factory=list)

    def __call__(self, method, url, headers, body) -> RawResponse:
        self.requests.append(RecordedRequest(method, url, list(headers), body))
        path = url.split("/api/v1", 1)[-1]
        if (method, path) in self.responses:
            return self.responses[(method, path)]
        if method == "POST" and path == "/sessions/":
            return envelope(self.session_data)
        if method == "PUT" and path == "/sessions/":
            return envelope()
        return RawResponse(status=404, reason="Not Found", body=b"")


@pytest.fixture
def signing_key() -> SigningKey:
    return SigningKey(bytes(range(32)))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def client(signing_key, backend):
    return new_client("access-1", bytes(signing_key), transport=backend)
