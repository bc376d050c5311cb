"""
stock_orchestrator.api.routers.availability

Product availability endpoint (catalog + inventory).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from stock_orchestrator.api.deps import availability_service
from stock_orchestrator.api.errors import error_response
from stock_orchestrator.services.availability import AvailabilityService

router = APIRouter(tags=["availability"])


class AvailabilityResponse(BaseModel):
    producto: Any = None
    sucursales: Any = None


@router.get("/disponibilidad", response_model=AvailabilityResponse)
async def get_availability(
    id_producto: str | None = None,
    distrito: str | None = None,
    svc: AvailabilityService = Depends(availability_service),
) -> Any:
    try:
        result = await svc.get_availability(product_id=id_producto, district=distrito)
    except Exception as e:
        return error_response(e)
    return result.to_dict()
