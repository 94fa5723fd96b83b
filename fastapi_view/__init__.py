"""Template rendering for FastAPI views."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fastapi-view")
except PackageNotFoundError:
    __version__ = "dev"

from fastapi_view.config import ViewOptions, ViewSettings  # noqa: E402
from fastapi_view.engines import SUPPORTED_ENGINES  # noqa: E402
from fastapi_view.plugin import ReplyView, ViewDecorator, register_views  # noqa: E402
from fastapi_view.renderer import ViewRenderer  # noqa: E402

__all__ = [
    "SUPPORTED_ENGINES",
    "ReplyView",
    "ViewDecorator",
    "ViewOptions",
    "ViewRenderer",
    "ViewSettings",
    "__version__",
    "register_views",
]
