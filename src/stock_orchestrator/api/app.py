"""
stock_orchestrator.api.app

FastAPI app factory for the stock orchestrator service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and close the shared upstream HTTP client.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_404_NOT_FOUND, HTTP_405_METHOD_NOT_ALLOWED

from stock_orchestrator import __version__
from stock_orchestrator.api.errors import unhandled_exception_handler
from stock_orchestrator.api.routers.availability import router as availability_router
from stock_orchestrator.api.routers.health import router as health_router
from stock_orchestrator.api.routers.recipes import router as recipes_router
from stock_orchestrator.observability.logging import configure_logging, get_logger
from stock_orchestrator.observability.middleware import RequestContextMiddleware
from stock_orchestrator.settings import Settings
from stock_orchestrator.upstream_clients.http import UpstreamClient, build_http_client
from stock_orchestrator.upstream_clients.services import UpstreamServices

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            catalogo_url=settings.catalogo_url,
            inventario_url=settings.inventario_url,
            recetas_url=settings.recetas_url,
        )
        # `transport` lets tests route upstream calls to in-process fakes.
        http = build_http_client(settings, transport=transport)
        app.state.http = http
        app.state.upstream = UpstreamServices.from_settings(
            settings=settings,
            client=UpstreamClient(http=http, timeout_s=settings.upstream_timeout_s),
        )
        try:
            yield
        finally:
            await http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Stock Orchestrator",
        version=__version__,
        docs_url="/docs" if settings.serve_docs else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.serve_docs else None,
        lifespan=lifespan,
    )

    origins = settings.cors_origin_list
    allow_any = "*" in origins
    app.add_middleware(
        CORSMiddleware,
        # Credentials rule out a literal "*"; echo the caller's origin instead.
        allow_origins=[] if allow_any else origins,
        allow_origin_regex=".*" if allow_any else None,
        allow_credentials=True,
        allow_headers=["Content-Type", "Authorization"],
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    app.include_router(availability_router)
    app.include_router(recipes_router)

    # Unknown paths and unsupported methods on known paths get the same answer.
    app.add_exception_handler(HTTP_404_NOT_FOUND, _not_found)
    app.add_exception_handler(HTTP_405_METHOD_NOT_ALLOWED, _not_found)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    return app


async def _not_found(_: Request, __: Exception) -> JSONResponse:
    return JSONResponse(status_code=HTTP_404_NOT_FOUND, content={"detail": "Not found"})


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; business logic stays
# in services and the domain model.
