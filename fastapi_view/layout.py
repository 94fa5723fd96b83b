"""Layout composition: a page is rendered first, then injected into a layout as ``body``."""

from collections.abc import Awaitable, Callable
from typing import Any

from fastapi_view.engines import LAYOUT_ENGINES, EngineRenderer
from fastapi_view.exceptions import LayoutNotFoundException, LayoutUnsupportedException

RenderFunc = Callable[..., Awaitable[str]]


def validate_layout(engine: EngineRenderer, layout: str) -> None:
    """Check that the engine supports layouts and the layout file is accessible.

    Raises:
        LayoutUnsupportedException: If the engine cannot wrap pages in a layout
        LayoutNotFoundException: If the layout file does not exist
    """
    if not engine.supports_layout:
        raise LayoutUnsupportedException(engine.name, LAYOUT_ENGINES)

    if not engine.resolver.exists(layout, engine.extension):
        raise LayoutNotFoundException(layout)


def with_layout(render: RenderFunc, layout: str | None) -> RenderFunc:
    """Wrap a render function so its output is injected into ``layout``.

    Without a layout the render function is returned unchanged.
    """
    if not layout:
        return render

    async def render_with_layout(page: str, data: dict[str, Any], **kwargs: Any) -> str:
        body = await render(page, data, **kwargs)
        return await render(layout, {**data, "body": body}, **kwargs)

    return render_with_layout
