"""View renderer: engine selection, data merging, layouts and caching."""

from typing import Any

from fastapi_view.cache import TemplateCache
from fastapi_view.config import ViewOptions
from fastapi_view.engines import SUPPORTED_ENGINES, EngineRenderer, create_engine
from fastapi_view.exceptions import (
    LayoutConflictException,
    MissingEngineException,
    MissingPageException,
    UnsupportedEngineException,
)
from fastapi_view.layout import validate_layout, with_layout
from fastapi_view.logging_config import get_logger, log_with_context
from fastapi_view.minify import HtmlMinifier
from fastapi_view.paths import PageResolver

logger = get_logger(__name__)


class ViewRenderer:
    """Renders pages with the configured template engine.

    Configuration problems (missing or unsupported engine, invalid global
    layout) are raised from the constructor, so an application fails at
    startup rather than on its first request.
    """

    def __init__(self, options: ViewOptions | None = None, /, **overrides: Any):
        """Initialize the renderer.

        Args:
            options: View options object, positional only; built from ``overrides``
                when omitted. The ``options=`` keyword sets the engine options.
            **overrides: Option values, applied on top of ``options``

        Raises:
            MissingEngineException: If no engine is configured
            UnsupportedEngineException: If the engine name is unknown
            LayoutUnsupportedException: If a global layout is set for an engine without layouts
            LayoutNotFoundException: If the global layout file does not exist
        """
        if options is None:
            options = ViewOptions(**overrides)
        elif overrides:
            options = ViewOptions(**{**dict(options), **overrides})

        engine_name = options.engine_name
        if not engine_name:
            raise MissingEngineException()
        if engine_name not in SUPPORTED_ENGINES:
            raise UnsupportedEngineException(engine_name, SUPPORTED_ENGINES)

        self.options = options
        self.cache = TemplateCache(options.max_cache)
        self.resolver = PageResolver(
            options.templates_dir,
            self.cache,
            view_ext=options.view_ext,
            include_view_extension=options.include_view_extension,
        )
        self.minifier = HtmlMinifier(
            options.html_minifier,
            options.html_minifier_options,
            options.paths_to_exclude_html_minifier,
        )
        self.engine: EngineRenderer = create_engine(
            engine_name,
            options.engine_module,
            options,
            self.cache,
            self.resolver,
            self.minifier,
        )

        if options.layout:
            validate_layout(self.engine, options.layout)
        self._render = with_layout(self.engine.render, options.layout)

        self.engine.warm_up()

        log_with_context(
            logger,
            "info",
            "View renderer initialized",
            engine=engine_name,
            templates_dir=str(self.resolver.templates_dir),
            production=options.production,
            max_cache=options.max_cache,
            layout=options.layout,
            event_type="view_renderer_ready",
        )

    @property
    def engine_name(self) -> str:
        return self.engine.name

    def merge_context(
        self,
        data: dict[str, Any] | None = None,
        request_locals: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Merge data sources; later sources win.

        Order: default context, request locals, render data.
        """
        return {**self.options.default_context, **(request_locals or {}), **(data or {})}

    async def render(
        self,
        page: str,
        data: dict[str, Any] | None = None,
        *,
        request_locals: dict[str, Any] | None = None,
        layout: str | None = None,
        partials: dict[str, str] | None = None,
        requested_path: str | None = None,
    ) -> str:
        """Render a page to HTML.

        Args:
            page: Template name, with or without extension
            data: Render data
            request_locals: Per-request data shared by every view of the request
            layout: Layout for this render only
            partials: Partials for this render (name -> template path)
            requested_path: URL path of the current request, used by minification

        Returns:
            Rendered HTML

        Raises:
            MissingPageException: If no page is given
            LayoutConflictException: If a layout is given while a global layout is set
            ViewException: For any template or layout error
        """
        if not page:
            raise MissingPageException()

        render = self._render
        if layout:
            if self.options.layout:
                raise LayoutConflictException()
            validate_layout(self.engine, layout)
            render = with_layout(self.engine.render, layout)

        context = self.merge_context(data, request_locals)
        return await render(page, context, partials=partials, requested_path=requested_path)

    def clear_cache(self) -> None:
        """Drop cached templates, partials and resolved paths."""
        self.cache.clear()
        self.engine.reset()
