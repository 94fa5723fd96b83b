"""Registration of the view decorators on a FastAPI application."""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import Response

from fastapi_view.config import ViewOptions
from fastapi_view.logging_config import get_logger, log_with_context
from fastapi_view.middleware.error_handlers import register_error_handlers
from fastapi_view.renderer import ViewRenderer

logger = get_logger(__name__)


class ViewDecorator:
    """Application-level view: renders a page and returns the HTML string.

    Available as ``app.state.view`` (or the configured property name).
    """

    def __init__(self, renderer: ViewRenderer):
        self.renderer = renderer

    async def __call__(
        self,
        page: str,
        data: dict[str, Any] | None = None,
        *,
        layout: str | None = None,
        partials: dict[str, str] | None = None,
    ) -> str:
        return await self.renderer.render(page, data, layout=layout, partials=partials)

    def clear_cache(self) -> None:
        """Drop every cached template, partial and resolved path."""
        self.renderer.clear_cache()


class ReplyView:
    """Request-level view: renders a page into an HTML response.

    Data stored in ``request.state.locals`` is merged into every view of
    the request, under the data passed to the call.
    """

    def __init__(self, renderer: ViewRenderer, request: Request):
        self.renderer = renderer
        self.request = request

    @property
    def locals(self) -> dict[str, Any]:
        return getattr(self.request.state, "locals", None) or {}

    async def __call__(
        self,
        page: str,
        data: dict[str, Any] | None = None,
        *,
        layout: str | None = None,
        partials: dict[str, str] | None = None,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
    ) -> Response:
        """Render a page and wrap it in a response.

        Args:
            page: Template name
            data: Render data
            layout: Layout for this render only
            partials: Partials for this render (name -> template path)
            status_code: Response status code
            headers: Extra response headers; a Content-Type here replaces the default

        Returns:
            Response with the rendered HTML encoded in the configured charset
        """
        html = await self.renderer.render(
            page,
            data,
            request_locals=self.locals,
            layout=layout,
            partials=partials,
            requested_path=self.request.url.path,
        )
        return self.to_response(html, status_code, headers)

    def to_response(self, html: str, status_code: int = 200, headers: Mapping[str, str] | None = None) -> Response:
        charset = self.renderer.options.charset
        response_headers = dict(headers or {})
        if not any(name.lower() == "content-type" for name in response_headers):
            response_headers["Content-Type"] = f"text/html; charset={charset}"

        return Response(content=html.encode(charset), status_code=status_code, headers=response_headers)


def register_views(app: FastAPI, options: ViewOptions | None = None, /, **overrides: Any) -> ViewRenderer:
    """Register the view decorators on an application.

    Sets ``app.state.<property_name>`` to a ViewDecorator, attaches a
    ReplyView to ``request.state.<property_name>`` for every request and
    registers the view exception handler.

    Args:
        app: FastAPI application instance
        options: View options object, positional only (``options=`` is the engine options)
        **overrides: Option values, applied on top of ``options``

    Returns:
        The renderer backing both decorators

    Example:
        import mako

        register_views(app, engine={"mako": mako}, templates="templates")

        @app.get("/")
        async def index(request: Request):
            return await request.state.view("index", {"title": "Home"})
    """
    renderer = ViewRenderer(options, **overrides)
    property_name = renderer.options.property_name

    setattr(app.state, property_name, ViewDecorator(renderer))
    app.state.view_renderer = renderer

    @app.middleware("http")
    async def attach_reply_view(request: Request, call_next):
        """Expose the request-level view on request.state."""
        setattr(request.state, property_name, ReplyView(renderer, request))
        return await call_next(request)

    register_error_handlers(app)

    log_with_context(
        logger,
        "info",
        "View decorators registered",
        engine=renderer.engine_name,
        property_name=property_name,
        event_type="views_registered",
    )
    return renderer
