"""Optional HTML minification of rendered output."""

from typing import Any

from fastapi_view.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class HtmlMinifier:
    """Applies a user supplied minifier, e.g. the ``minify_html`` module.

    Any object exposing ``minify(html, **options)`` is accepted.
    """

    def __init__(
        self,
        minifier: Any = None,
        options: dict[str, Any] | None = None,
        excluded_paths: list[str] | None = None,
    ):
        self.minifier = minifier
        self.options = options or {}
        self.excluded_paths = list(excluded_paths or [])

    @property
    def enabled(self) -> bool:
        return callable(getattr(self.minifier, "minify", None))

    def applies_to(self, requested_path: str | None) -> bool:
        """Whether output for the given request path should be minified."""
        return self.enabled and requested_path not in self.excluded_paths

    def __call__(self, html: str, requested_path: str | None = None) -> str:
        if not self.applies_to(requested_path):
            return html

        minified = self.minifier.minify(html, **self.options)
        log_with_context(
            logger,
            "debug",
            "Minified rendered HTML",
            requested_path=requested_path,
            original_size=len(html),
            minified_size=len(minified),
            event_type="html_minified",
        )
        return minified
