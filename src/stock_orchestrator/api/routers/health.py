"""
stock_orchestrator.api.routers.health

Liveness endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Response

router = APIRouter()


@router.get("/healthz")
async def healthz(response: Response) -> dict[str, str]:
    # Liveness only: upstream services are not probed.
    response.headers["Cache-Control"] = "no-store"
    return {"status": "ok"}
