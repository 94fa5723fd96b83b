"""Template engine adapters and the name -> adapter dispatch table."""

from types import ModuleType

from fastapi_view.cache import TemplateCache
from fastapi_view.config import ViewOptions
from fastapi_view.engines.base import EngineRenderer
from fastapi_view.engines.chameleon_engine import ChameleonRenderer
from fastapi_view.engines.genshi_engine import GenshiRenderer
from fastapi_view.engines.handlebars_engine import HandlebarsRenderer
from fastapi_view.engines.jinja2_engine import Jinja2Renderer
from fastapi_view.engines.liquid_engine import LiquidRenderer
from fastapi_view.engines.mako_engine import MakoRenderer
from fastapi_view.engines.mustache_engine import MustacheRenderer
from fastapi_view.engines.pug_engine import PugRenderer
from fastapi_view.engines.tornado_engine import TornadoRenderer
from fastapi_view.engines.velocity_engine import VelocityRenderer
from fastapi_view.exceptions import UnsupportedEngineException
from fastapi_view.minify import HtmlMinifier
from fastapi_view.paths import PageResolver

ENGINE_RENDERERS: dict[str, type[EngineRenderer]] = {
    renderer.name: renderer
    for renderer in (
        ChameleonRenderer,
        GenshiRenderer,
        HandlebarsRenderer,
        Jinja2Renderer,
        LiquidRenderer,
        MakoRenderer,
        MustacheRenderer,
        PugRenderer,
        TornadoRenderer,
        VelocityRenderer,
    )
}

SUPPORTED_ENGINES: tuple[str, ...] = tuple(ENGINE_RENDERERS)

LAYOUT_ENGINES: tuple[str, ...] = tuple(name for name, renderer in ENGINE_RENDERERS.items() if renderer.supports_layout)


def create_engine(
    name: str,
    module: ModuleType,
    options: ViewOptions,
    cache: TemplateCache,
    resolver: PageResolver,
    minifier: HtmlMinifier,
) -> EngineRenderer:
    """Build the adapter for an engine name.

    Raises:
        UnsupportedEngineException: If no adapter exists for the name
    """
    renderer = ENGINE_RENDERERS.get(name)
    if renderer is None:
        raise UnsupportedEngineException(name, SUPPORTED_ENGINES)
    return renderer(module, options, cache, resolver, minifier)


__all__ = [
    "ENGINE_RENDERERS",
    "LAYOUT_ENGINES",
    "SUPPORTED_ENGINES",
    "EngineRenderer",
    "create_engine",
]
