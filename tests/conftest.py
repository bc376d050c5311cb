"""
tests.conftest

Shared fixtures: fake upstream services behind `httpx.MockTransport`.

Responsibilities:
- Serve catalog/inventory/recipes payloads from in-memory dicts.
- Inject failures (status codes or transport exceptions) per upstream route.
- Provide wired upstream clients and an in-process app client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
import pytest_asyncio

from stock_orchestrator.api.app import create_app
from stock_orchestrator.settings import Settings
from stock_orchestrator.upstream_clients.http import UpstreamClient, build_http_client
from stock_orchestrator.upstream_clients.services import UpstreamServices

CATALOG_HOST = "catalogo.test"
INVENTORY_HOST = "inventario.test"
RECIPES_HOST = "recetas.test"


class FakeUpstreams:
    """
    In-memory stand-in for the three upstream services.
    `fail(...)` overrides one route with a canned response or a raised exception.
    """

    def __init__(self) -> None:
        self.products: dict[str, Any] = {}
        self.stock: dict[str, list[dict[str, Any]]] = {}
        self.recipes: dict[str, Any] = {}
        self.requests: list[httpx.Request] = []
        self._failures: dict[tuple[str, str, str | None], httpx.Response | Exception] = {}

    def fail(
        self,
        host: str,
        path: str,
        outcome: httpx.Response | Exception,
        *,
        product_id: str | None = None,
    ) -> None:
        self._failures[(host, path, product_id)] = outcome

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        host, path = request.url.host, request.url.path
        product_param = request.url.params.get("id_producto")

        outcome = self._failures.get((host, path, product_param)) or self._failures.get(
            (host, path, None)
        )
        if isinstance(outcome, Exception):
            raise outcome
        if outcome is not None:
            return outcome

        if host == CATALOG_HOST and path.startswith("/productos/"):
            product_id = path.removeprefix("/productos/")
            if product_id in self.products:
                return httpx.Response(200, json=self.products[product_id])
            return httpx.Response(404, json={"detail": "Producto no encontrado"})

        if host == INVENTORY_HOST and path == "/stock":
            entries = self.stock.get(product_param or "", [])
            district = request.url.params.get("distrito")
            if district is not None:
                entries = [e for e in entries if e.get("distrito") == district]
            return httpx.Response(200, json=entries)

        if host == RECIPES_HOST and path.startswith("/recetas/"):
            recipe_id = path.removeprefix("/recetas/")
            if recipe_id in self.recipes:
                return httpx.Response(200, json=self.recipes[recipe_id])
            return httpx.Response(404, json={"detail": "Receta no encontrada"})

        return httpx.Response(404, json={"detail": "Not found"})

    def paths(self, host: str) -> list[str]:
        return [r.url.path for r in self.requests if r.url.host == host]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        catalogo_url=f"http://{CATALOG_HOST}",
        inventario_url=f"http://{INVENTORY_HOST}",
        recetas_url=f"http://{RECIPES_HOST}",
    )


@pytest.fixture
def fake() -> FakeUpstreams:
    return FakeUpstreams()


@pytest_asyncio.fixture
async def upstream(settings: Settings, fake: FakeUpstreams) -> AsyncIterator[UpstreamServices]:
    async with build_http_client(settings, transport=httpx.MockTransport(fake)) as http:
        client = UpstreamClient(http=http, timeout_s=settings.upstream_timeout_s)
        yield UpstreamServices.from_settings(settings=settings, client=client)


@pytest_asyncio.fixture
async def api(settings: Settings, fake: FakeUpstreams) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, transport=httpx.MockTransport(fake))

    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
