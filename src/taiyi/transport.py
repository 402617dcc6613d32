"""Default blocking HTTP transport built on ``urllib.request``."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request

from taiyi.errors import TransportError
from taiyi.types import HeaderList, RawResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def urllib_transport(
    method: str,
    url: str,
    headers: HeaderList,
    body: bytes | None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> RawResponse:
    request = urllib.request.Request(url, method=method, data=body)
    for name, value in headers:
        request.add_header(name, value)

    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return RawResponse(status=response.status, reason=response.reason, body=response.read())
    except urllib.error.HTTPError as error:
        # Error statuses still carry a response; the envelope layer turns them into TransportError.
        return RawResponse(status=error.code, reason=str(error.reason), body=error.read())
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as error:
        logger.debug("%s %s failed: %s", method, url, error)
        raise TransportError(f"{method} {url} failed: {error}") from error
