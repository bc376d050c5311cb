"""
stock_orchestrator.upstream_clients.http

HTTP client boundary shared by all upstream calls.

Responsibilities:
- Build the process-wide `httpx.AsyncClient` (timeout, redirect bound, pool limits).
- Issue a single GET per call and decode the JSON body.
- Translate httpx failures into the orchestrator failure taxonomy.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

import httpx

from stock_orchestrator.errors import LocalError, UpstreamHTTPError, UpstreamUnreachable
from stock_orchestrator.observability.logging import get_logger
from stock_orchestrator.settings import Settings

log = get_logger(__name__)


def build_http_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    # One client (and one connection pool) per process; closed by the app lifespan.
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.upstream_timeout_s),
        follow_redirects=True,
        max_redirects=settings.upstream_max_redirects,
        limits=httpx.Limits(max_connections=100, max_keepalive_connections=20),
        transport=transport,
    )


class UpstreamClient:
    """
    Single-attempt GET wrapper:
    - No retries and no circuit breaking; the timeout is the only liveness guard
    - `timeout_s` caps the whole call (connect, send, headers and full body)
    - Failures surface as `UpstreamHTTPError`, `UpstreamUnreachable` or `LocalError`
    """

    def __init__(self, *, http: httpx.AsyncClient, timeout_s: float) -> None:
        self._http = http
        self._timeout_s = timeout_s

    async def get(
        self,
        base_url: str,
        path: str,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{base_url}{path}"
        # None-valued params are dropped instead of being sent as empty strings.
        query = {k: v for k, v in (params or {}).items() if v is not None}
        log.debug("upstream_request", url=url, params=query)

        try:
            # httpx timeouts are per phase (each read resets the clock); this one is per call.
            async with asyncio.timeout(self._timeout_s):
                r = await self._http.get(url, params=query)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
            raise LocalError(f"could not send request to {url}: {e}", url=url) from e
        except (httpx.TransportError, httpx.TooManyRedirects) as e:
            log.warning("upstream_unreachable", url=url, error=type(e).__name__)
            raise UpstreamUnreachable(f"no response from {url}: {e!r}", url=url) from e
        except TimeoutError as e:
            log.warning("upstream_unreachable", url=url, error="CallTimeout")
            raise UpstreamUnreachable(
                f"no complete response from {url} within {self._timeout_s}s", url=url
            ) from e

        if not r.is_success:
            log.warning("upstream_error_status", url=url, status=r.status_code)
            raise UpstreamHTTPError(status=r.status_code, body=_decode_body(r), url=url)
        return _decode_body(r)


def _decode_body(r: httpx.Response) -> Any:
    # Upstreams mostly speak JSON; keep the raw text when they don't (e.g. proxy error pages).
    try:
        return r.json()
    except ValueError:
        return r.text


# --- Module Notes -----------------------------------------------------------
# Base URLs, timeout and redirect bound come from `Settings` and are fixed after startup.
