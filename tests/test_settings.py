"""
tests.test_settings

Settings resolution: dev defaults, prod strictness and normalization.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from stock_orchestrator.settings import Settings

_URL_VARS = ("ORQ_CATALOGO_URL", "ORQ_INVENTARIO_URL", "ORQ_RECETAS_URL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in _URL_VARS:
        monkeypatch.delenv(var, raising=False)


def test_dev_defaults_point_to_local_services() -> None:
    s = Settings(env="dev")
    assert s.catalogo_url == "http://localhost:8084"
    assert s.inventario_url == "http://localhost:8082"
    assert s.recetas_url == "http://localhost:8083"
    assert s.upstream_timeout_ms == 5000
    assert s.upstream_max_redirects == 3
    assert s.api_port == 8085


def test_prod_requires_upstream_urls() -> None:
    with pytest.raises(ValidationError, match="ORQ_INVENTARIO_URL"):
        Settings(
            env="prod",
            catalogo_url="http://catalogo.internal",
            recetas_url="http://recetas.internal",
        )


def test_env_vars_are_read_and_trailing_slash_dropped(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORQ_ENV", "prod")
    monkeypatch.setenv("ORQ_CATALOGO_URL", "http://catalogo.internal/")
    monkeypatch.setenv("ORQ_INVENTARIO_URL", "http://inventario.internal")
    monkeypatch.setenv("ORQ_RECETAS_URL", "http://recetas.internal/api/")
    monkeypatch.setenv("ORQ_UPSTREAM_TIMEOUT_MS", "250")

    s = Settings()

    assert s.catalogo_url == "http://catalogo.internal"
    assert s.recetas_url == "http://recetas.internal/api"
    assert s.upstream_timeout_s == 0.25


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(env="test", upstream_timeout_ms=0)


def test_cors_origin_list() -> None:
    s = Settings(env="test", cors_origins=" https://a.example , https://b.example,,")
    assert s.cors_origin_list == ["https://a.example", "https://b.example"]


def test_settings_are_immutable() -> None:
    s = Settings(env="test")
    with pytest.raises(ValidationError):
        s.upstream_timeout_ms = 1  # type: ignore[misc]
