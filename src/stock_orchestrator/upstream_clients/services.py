"""
stock_orchestrator.upstream_clients.services

Typed clients for the three upstream services.

Responsibilities:
- Own the URL layout of the catalog, inventory and recipes services.
- Percent-encode caller-supplied identifiers in paths.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from stock_orchestrator.settings import Settings
from stock_orchestrator.upstream_clients.http import UpstreamClient


def _segment(value: str) -> str:
    return quote(str(value), safe="")


class CatalogClient:
    def __init__(self, *, client: UpstreamClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    async def product(self, product_id: str) -> Any:
        # Raises UpstreamHTTPError(404) when the catalog does not know the product.
        return await self._client.get(self._base_url, f"/productos/{_segment(product_id)}")


class InventoryClient:
    def __init__(self, *, client: UpstreamClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    async def stock(self, product_id: str, district: str | None = None) -> Any:
        # Returns a list of stock entries, one per branch holding the product.
        return await self._client.get(
            self._base_url,
            "/stock",
            {"id_producto": product_id, "distrito": district},
        )


class RecipesClient:
    def __init__(self, *, client: UpstreamClient, base_url: str) -> None:
        self._client = client
        self._base_url = base_url

    async def recipe(self, recipe_id: str) -> Any:
        return await self._client.get(self._base_url, f"/recetas/{_segment(recipe_id)}")


@dataclass(frozen=True, slots=True)
class UpstreamServices:
    catalog: CatalogClient
    inventory: InventoryClient
    recipes: RecipesClient

    @classmethod
    def from_settings(cls, *, settings: Settings, client: UpstreamClient) -> UpstreamServices:
        return cls(
            catalog=CatalogClient(client=client, base_url=settings.catalogo_url),
            inventory=InventoryClient(client=client, base_url=settings.inventario_url),
            recipes=RecipesClient(client=client, base_url=settings.recetas_url),
        )


# --- Module Notes -----------------------------------------------------------
# Swapping an upstream (or faking one in tests) only touches this module's wiring.
