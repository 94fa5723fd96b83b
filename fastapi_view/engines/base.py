"""Base class shared by every template engine adapter."""

import time
from abc import ABC, abstractmethod
from importlib import import_module
from pathlib import Path
from types import ModuleType
from typing import Any, ClassVar

from starlette.concurrency import run_in_threadpool

from fastapi_view.cache import TemplateCache
from fastapi_view.config import ViewOptions
from fastapi_view.exceptions import TemplateNotFoundException, TemplateRenderException, ViewException
from fastapi_view.logging_config import get_logger, log_with_context
from fastapi_view.minify import HtmlMinifier
from fastapi_view.paths import PageResolver

logger = get_logger(__name__)


class EngineRenderer(ABC):
    """Adapts one template library to a common ``render`` coroutine.

    Subclasses implement ``render_page`` with whatever calling convention
    their library uses (plain call, awaitable or compile-then-invoke) and
    may override ``configure``, ``compile_source``, ``warm_up`` and
    ``reset``.
    """

    name: ClassVar[str]
    extension: ClassVar[str]
    supports_layout: ClassVar[bool] = False

    def __init__(
        self,
        module: ModuleType,
        options: ViewOptions,
        cache: TemplateCache,
        resolver: PageResolver,
        minifier: HtmlMinifier,
    ):
        self.module = module
        self.options = options
        self.cache = cache
        self.resolver = resolver
        self.minifier = minifier
        self.engine_options: dict[str, Any] = dict(options.options)
        self.configure()

    @property
    def templates_dir(self) -> Path:
        return self.resolver.templates_dir

    @property
    def production(self) -> bool:
        return self.options.production

    @property
    def charset(self) -> str:
        return self.options.charset

    def submodule(self, name: str) -> ModuleType:
        """Import a submodule of the engine library, e.g. ``mako.lookup``."""
        return import_module(f"{self.module.__name__}.{name}")

    def configure(self) -> None:
        """Build long-lived engine objects (environments, loaders)."""

    def configured(self, environment: Any) -> Any:
        """Hand a freshly built environment to the ``on_configure`` callback."""
        if self.options.on_configure is not None:
            self.options.on_configure(environment)
        return environment

    def warm_up(self) -> None:
        """Load whatever should be ready before the first request."""

    def reset(self) -> None:
        """Drop engine-internal caches, called when the view cache is cleared."""
        self.configure()

    def compile_source(self, page: str, source: str) -> Any:
        """Turn a template source into the object stored in the cache."""
        return source

    def read_file(self, path: Path) -> str:
        return path.read_text(encoding=self.charset)

    def load_template(self, page: str, path: Path) -> Any:
        return self.compile_source(page, self.read_file(path))

    def ensure_exists(self, page: str) -> Path:
        """Return the template path, raising when no such file exists."""
        path = self.resolver.template_path(page)
        if not path.is_file():
            raise TemplateNotFoundException(page)
        return path

    async def read_template(self, page: str, path: Path | None = None) -> Any:
        """Get a template from the cache or the filesystem.

        In production a cached template is reused; otherwise the file is
        read again and the cache refreshed.

        Args:
            page: Resolved page name, also the cache key
            path: File to read, defaults to the page inside the templates dir

        Returns:
            The template source, or the compiled template for engines that
            compile on load
        """
        cached = self.cache.get(page)
        if cached is not None and self.production:
            return cached

        template = await run_in_threadpool(self.load_template, page, path or self.resolver.template_path(page))
        self.cache.set(page, template)
        return template

    async def read_partials(self, key: str, partials: dict[str, str]) -> dict[str, str]:
        """Get partial sources (name -> source) from the cache or the filesystem.

        Args:
            key: Owner of the partials, used to build the cache key
            partials: Partial names mapped to template paths

        Returns:
            Partial names mapped to their sources
        """
        cache_key = f"{key}-Partials"
        cached = self.cache.get(cache_key)
        if cached is not None and self.production:
            return cached

        if not partials:
            return {}

        loaded = {}
        for name, partial_path in partials.items():
            loaded[name] = await run_in_threadpool(self.read_file, self.resolver.template_path(partial_path))

        self.cache.set(cache_key, loaded)
        return loaded

    async def render(
        self,
        page: str,
        data: dict[str, Any],
        *,
        partials: dict[str, str] | None = None,
        requested_path: str | None = None,
    ) -> str:
        """Render a page with already merged data.

        Args:
            page: Page name as given by the caller
            data: Template context
            partials: Render-time partials (name -> template path)
            requested_path: URL path of the current request, if any

        Returns:
            Rendered HTML

        Raises:
            TemplateNotFoundException: If the template file does not exist
            TemplateRenderException: If the engine fails to compile or render
        """
        resolved = self.resolver.resolve(page, self.extension)
        started = time.perf_counter()

        try:
            html = await self.render_page(resolved, data, partials or {})
        except ViewException:
            raise
        except FileNotFoundError as e:
            raise TemplateNotFoundException(resolved) from e
        except Exception as e:
            log_with_context(
                logger,
                "warning",
                "Template rendering failed",
                engine=self.name,
                page=resolved,
                error=str(e),
                error_type=type(e).__name__,
                event_type="render_error",
            )
            raise TemplateRenderException(resolved, e) from e

        log_with_context(
            logger,
            "debug",
            "Template rendered",
            engine=self.name,
            page=resolved,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
            event_type="render",
        )
        return self.minifier(html, requested_path)

    @abstractmethod
    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        """Render a resolved page with the engine library."""
