"""Runtime infrastructure helpers for the upstream HTTP transport."""

import logging
import time
from functools import lru_cache

import httpx

from studio_api.normalizers import WireRequest
from studio_api.settings import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_http_client() -> httpx.Client:
    """Create the shared upstream client (reused across warm Lambda invocations)."""
    return httpx.Client(timeout=get_settings().upstream_timeout_seconds)


def send_upstream(client: httpx.Client, wire_request: WireRequest, upstream: str) -> httpx.Response:
    """Issue exactly one upstream call. Failures propagate to the caller untouched."""
    start = time.time()
    response = client.request(
        wire_request.method,
        wire_request.url,
        headers=dict(wire_request.headers),
        params=dict(wire_request.params) or None,
        json=wire_request.json_body,
    )
    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        "Upstream call completed",
        extra={
            "upstream": upstream,
            "upstream_status": response.status_code,
            "upstream_duration_ms": duration_ms,
        },
    )
    return response
