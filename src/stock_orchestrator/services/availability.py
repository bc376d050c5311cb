"""
stock_orchestrator.services.availability

Availability Aggregator: catalog product joined with inventory stock.

Responsibilities:
- Validate the product id before any upstream call.
- Fetch product and stock concurrently.
- Treat a catalog 404 as "product absent" rather than as a failure.
"""

from __future__ import annotations

import asyncio
from typing import Any

from stock_orchestrator.domain.models import Availability
from stock_orchestrator.errors import InvalidArgument, UpstreamHTTPError
from stock_orchestrator.observability.logging import get_logger
from stock_orchestrator.upstream_clients.services import CatalogClient, InventoryClient

log = get_logger(__name__)


class AvailabilityService:
    def __init__(self, *, catalog: CatalogClient, inventory: InventoryClient) -> None:
        self._catalog = catalog
        self._inventory = inventory

    async def get_availability(
        self, *, product_id: str | None, district: str | None = None
    ) -> Availability:
        if not product_id or not str(product_id).strip():
            raise InvalidArgument("id_producto requerido")

        # Both lookups start before either completes; any failure aborts the join.
        product, branches = await asyncio.gather(
            self._product_or_none(product_id),
            self._inventory.stock(product_id, district),
        )
        return Availability(producto=product, sucursales=branches)

    async def _product_or_none(self, product_id: str) -> Any:
        try:
            return await self._catalog.product(product_id)
        except UpstreamHTTPError as e:
            if e.status != 404:
                raise
            log.info("product_not_in_catalog", product_id=product_id)
            return None


# --- Module Notes -----------------------------------------------------------
# Stock entries are returned exactly as the inventory service sent them; quantity
# aggregation only happens during recipe validation.
