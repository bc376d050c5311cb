"""
stock_orchestrator.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for upstream-backed services.
- Encapsulate app.state access patterns (shared upstream clients).
"""

from __future__ import annotations

from fastapi import Depends, Request

from stock_orchestrator.services.availability import AvailabilityService
from stock_orchestrator.services.recipe_validation import RecipeValidationService
from stock_orchestrator.upstream_clients.services import UpstreamServices


def upstream_from_app(request: Request) -> UpstreamServices:
    # Built once on app startup in `stock_orchestrator.api.app.create_app`.
    return request.app.state.upstream  # type: ignore[attr-defined]


def availability_service(
    upstream: UpstreamServices = Depends(upstream_from_app),
) -> AvailabilityService:
    return AvailabilityService(catalog=upstream.catalog, inventory=upstream.inventory)


def recipe_validation_service(
    upstream: UpstreamServices = Depends(upstream_from_app),
) -> RecipeValidationService:
    return RecipeValidationService(recipes=upstream.recipes, inventory=upstream.inventory)


# --- Module Notes -----------------------------------------------------------
# Services are cheap to build per request; the expensive part (connection pool) is shared.
