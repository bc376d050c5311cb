"""
stock_orchestrator.errors

Failure taxonomy raised by the core operations.

Responsibilities:
- Give each failure kind its own type so the API boundary can map it uniformly.
- Preserve upstream status/body verbatim for diagnosis.
"""

from __future__ import annotations

from typing import Any


class OrchestratorError(Exception):
    """Base class for every failure the core raises on purpose."""


class InvalidArgument(OrchestratorError):
    """Caller-supplied precondition violated (detected before any upstream call)."""


class UpstreamHTTPError(OrchestratorError):
    """An upstream service answered with a non-2xx status."""

    def __init__(self, *, status: int, body: Any, url: str) -> None:
        super().__init__(f"upstream responded {status} for {url}")
        self.status = status
        self.body = body
        self.url = url


class UpstreamUnreachable(OrchestratorError):
    """No response was received: DNS, connect, timeout or transport failure."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class LocalError(OrchestratorError):
    """The request could not even be built or dispatched (e.g. malformed URL)."""

    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


# --- Module Notes -----------------------------------------------------------
# The core never formats HTTP responses; `stock_orchestrator.api.errors` owns that.
