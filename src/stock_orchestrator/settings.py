"""
stock_orchestrator.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Resolve upstream base URLs (strict in prod, local defaults elsewhere).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Local ports of the upstream services when running the stack on one machine.
_DEV_UPSTREAM_URLS = {
    "catalogo_url": "http://localhost:8084",
    "inventario_url": "http://localhost:8082",
    "recetas_url": "http://localhost:8083",
}


class Settings(BaseSettings):
    """
    Immutable, env-driven configuration:
    - Built once at process start
    - Passed explicitly into the app factory and the upstream clients
    """

    model_config = SettingsConfigDict(env_prefix="ORQ_", case_sensitive=False, frozen=True)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "stock-orchestrator"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8085

    # Comma-separated list; "*" allows any origin.
    cors_origins: str = "*"

    # Upstream services (None = not configured; filled with dev defaults outside prod)
    catalogo_url: str | None = None
    inventario_url: str | None = None
    recetas_url: str | None = None

    upstream_timeout_ms: int = Field(default=5000, gt=0)
    upstream_max_redirects: int = Field(default=3, ge=0)

    # Docs (Swagger UI + OpenAPI schema) are opt-in.
    serve_docs: bool = False

    @model_validator(mode="after")
    def _resolve_upstream_urls(self) -> Settings:
        for name, default in _DEV_UPSTREAM_URLS.items():
            value = getattr(self, name)
            if not value:
                if self.env == "prod":
                    raise ValueError(f"missing required setting ORQ_{name.upper()}")
                value = default
            # frozen model: bypass __setattr__ while the instance is still being built
            object.__setattr__(self, name, value.rstrip("/"))
        return self

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def upstream_timeout_s(self) -> float:
        return self.upstream_timeout_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read-only after startup and shared by every concurrent request;
# tests build their own instances instead of mutating the cached one.
