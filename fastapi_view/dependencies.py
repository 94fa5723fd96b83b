"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from fastapi_view.plugin import ReplyView
from fastapi_view.renderer import ViewRenderer


async def get_view_renderer(request: Request) -> ViewRenderer:
    """
    Get the view renderer from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewRenderer instance.

    Raises:
        RuntimeError: If register_views was not called for the application.
    """
    renderer: ViewRenderer | None = getattr(request.app.state, "view_renderer", None)

    if renderer is None:
        raise RuntimeError("View renderer not initialized. Call register_views(app, ...) first.")

    return renderer


async def get_view(request: Request) -> ReplyView:
    """
    Get the request-level view.

    Example:
        @app.get("/")
        async def index(view: ReplyView = Depends(get_view)):
            return await view("index", {"title": "Home"})
    """
    return ReplyView(await get_view_renderer(request), request)
