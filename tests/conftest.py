"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from fastapi_view.cache import TemplateCache
from fastapi_view.plugin import register_views

TEMPLATES_DIR = Path(__file__).parent / "templates"


@pytest.fixture
def templates_dir() -> Path:
    """Root of the template fixtures, one subdirectory per engine."""
    return TEMPLATES_DIR


@pytest.fixture
def cache() -> TemplateCache:
    """Small template cache."""
    return TemplateCache(max_size=3)


@pytest.fixture
def fake_minifier() -> SimpleNamespace:
    """Minifier stand-in that strips whitespace between tags and records its calls."""
    calls: list[dict[str, Any]] = []

    def minify(html: str, **options: Any) -> str:
        calls.append(options)
        return "><".join(part.strip() for part in html.split(">\n<"))

    return SimpleNamespace(minify=minify, calls=calls)


@pytest.fixture
def make_app() -> Callable[..., FastAPI]:
    """Build an app with views registered and a catch-all page route.

    ``GET /render/{page}`` renders ``page`` with the query parameters as data.
    """

    def _make_app(**options: Any) -> FastAPI:
        app = FastAPI()
        register_views(app, **options)

        @app.get("/render/{page}")
        async def render_page(page: str, request: Request):
            return await request.state.view(page, dict(request.query_params))

        return app

    return _make_app


@pytest.fixture
def client_for(make_app) -> Callable[..., TestClient]:
    """TestClient factory for make_app."""

    def _client_for(**options: Any) -> TestClient:
        return TestClient(make_app(**options))

    return _client_for
