"""
stock_orchestrator.services.recipe_validation

Recipe Validator: checks a recipe's ingredients against current stock.

Responsibilities:
- Fetch the recipe, then fan out one stock lookup per ingredient.
- Reconcile requested vs available quantities per ingredient.
- Derive the suggested status for the whole recipe.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from stock_orchestrator.domain.models import ValidationResult, derive_status, reconcile_item
from stock_orchestrator.observability.logging import get_logger
from stock_orchestrator.upstream_clients.services import InventoryClient, RecipesClient

log = get_logger(__name__)


class RecipeValidationService:
    def __init__(self, *, recipes: RecipesClient, inventory: InventoryClient) -> None:
        self._recipes = recipes
        self._inventory = inventory

    async def validate_recipe(
        self, *, recipe_id: str, district: str | None = None
    ) -> ValidationResult:
        recipe = await self._recipes.recipe(recipe_id)
        ingredients = _ingredients(recipe)

        # All-or-nothing join: the first failing lookup propagates; stragglers are
        # left to finish on their own and their results are discarded.
        stock_lists = await asyncio.gather(
            *(self._inventory.stock(i.get("id_producto"), district) for i in ingredients)
        )

        items = tuple(reconcile_item(i, s) for i, s in zip(ingredients, stock_lists))
        status = derive_status(items)
        log.info(
            "recipe_validated",
            recipe_id=recipe_id,
            ingredients=len(items),
            status=status.value,
        )
        return ValidationResult(
            id_receta=recipe.get("id_receta"),
            estado_sugerido=status,
            items=items,
        )


def _ingredients(recipe: Any) -> list[Mapping[str, Any]]:
    # Every ingredient must yield an item; a malformed recipe fails the request.
    if not isinstance(recipe, Mapping):
        raise TypeError(f"recipe payload is not an object: {type(recipe).__name__}")
    detail = recipe.get("detalle")
    if detail is None:
        return []
    if not isinstance(detail, list):
        raise TypeError(f"recipe 'detalle' is not a list: {type(detail).__name__}")
    for position, entry in enumerate(detail):
        if not isinstance(entry, Mapping):
            raise TypeError(
                f"recipe 'detalle[{position}]' is not an object: {type(entry).__name__}"
            )
    return detail
