"""
stock_orchestrator.api.errors

Error Mapper: failure -> (HTTP status, JSON body).

Responsibilities:
- Map the failure taxonomy uniformly for every route.
- Pass upstream status codes through so failures stay diagnosable.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_504_GATEWAY_TIMEOUT,
)

from stock_orchestrator.errors import InvalidArgument, UpstreamHTTPError, UpstreamUnreachable
from stock_orchestrator.observability.logging import get_logger

log = get_logger(__name__)


def map_upstream_error(exc: BaseException) -> tuple[int, dict[str, Any]]:
    if isinstance(exc, UpstreamHTTPError):
        return exc.status, {
            "error": "Upstream error",
            "upstream_status": exc.status,
            "upstream_body": exc.body,
        }
    if isinstance(exc, UpstreamUnreachable):
        return HTTP_504_GATEWAY_TIMEOUT, {"error": "Upstream timeout/unreachable"}
    if isinstance(exc, InvalidArgument):
        return HTTP_400_BAD_REQUEST, {"error": str(exc)}
    return HTTP_500_INTERNAL_SERVER_ERROR, {"error": "Orchestrator error", "detail": str(exc)}


def error_response(exc: BaseException) -> JSONResponse:
    status, body = map_upstream_error(exc)
    if status >= HTTP_500_INTERNAL_SERVER_ERROR and not isinstance(
        exc, (UpstreamHTTPError, UpstreamUnreachable)
    ):
        log.error("orchestrator_error", error=type(exc).__name__, detail=str(exc), exc_info=exc)
    else:
        log.warning("request_failed", error=type(exc).__name__, status=status)
    return JSONResponse(status_code=status, content=body)


async def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    # Last resort for anything a router did not map itself.
    return error_response(exc)


# --- Module Notes -----------------------------------------------------------
# Core operations raise typed failures only; this is the single place that turns
# them into HTTP responses.
