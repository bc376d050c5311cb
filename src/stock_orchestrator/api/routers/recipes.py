"""
stock_orchestrator.api.routers.recipes

Recipe validation endpoint (recipes + inventory).

Responsibilities:
- Validate one recipe against current stock and return per-ingredient results.
- Propagate upstream failures (e.g. unknown recipe -> 404) through the Error Mapper.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from stock_orchestrator.api.deps import recipe_validation_service
from stock_orchestrator.api.errors import error_response
from stock_orchestrator.domain.models import RecipeStatus
from stock_orchestrator.services.recipe_validation import RecipeValidationService

router = APIRouter(prefix="/recetas", tags=["recipes"])


class ValidationItemResponse(BaseModel):
    id_producto: Any = None
    solicitado: int | float | None = None
    disponible: int | float
    id_sucursal_sugerida: Any = None


class ValidationResponse(BaseModel):
    id_receta: Any = None
    estado_sugerido: RecipeStatus
    items: list[ValidationItemResponse] = Field(default_factory=list)


@router.get("/{id_receta}/validacion", response_model=ValidationResponse)
async def validate_recipe(
    id_receta: str,
    distrito: str | None = None,
    svc: RecipeValidationService = Depends(recipe_validation_service),
) -> Any:
    try:
        result = await svc.validate_recipe(recipe_id=id_receta, district=distrito)
    except Exception as e:
        # Unknown recipes surface as the recipes service's own 404.
        return error_response(e)
    return result.to_dict()


# --- Module Notes -----------------------------------------------------------
# Validation logic lives in `services.recipe_validation`; this router only wires it.
