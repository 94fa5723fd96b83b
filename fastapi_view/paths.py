"""Template path resolution."""

import posixpath
from pathlib import Path

from fastapi_view.cache import TemplateCache


class PageResolver:
    """Turns page names into template paths relative to the templates directory.

    Resolved names are memoised in the shared template cache.
    """

    def __init__(
        self,
        templates_dir: Path,
        cache: TemplateCache,
        view_ext: str = "",
        include_view_extension: bool = False,
    ):
        self.templates_dir = templates_dir
        self.cache = cache
        self.view_ext = view_ext
        self.include_view_extension = include_view_extension

    def default_extension(self, engine_extension: str) -> str:
        """Extension used when a page carries none (without dot)."""
        return self.view_ext or engine_extension

    def extension_for(self, page: str, extension: str) -> str:
        """Extension (with dot) appended to the page stem.

        Args:
            page: Page name as given by the caller
            extension: Default extension of the engine
        """
        if self.view_ext:
            return f".{self.view_ext}"
        if self.include_view_extension:
            return f".{extension}"
        return posixpath.splitext(page)[1] or f".{self.default_extension(extension)}"

    def resolve(self, page: str, extension: str) -> str:
        """Resolve a page name to a normalised template path.

        Args:
            page: Page name, with or without extension
            extension: Default extension of the engine

        Returns:
            Template path relative to the templates directory
        """
        key = f"getPage-{page}-{extension}"
        result = self.cache.get(key)
        if isinstance(result, str):
            return result

        page = page.replace("\\", "/")
        stem = posixpath.splitext(posixpath.basename(page))[0]
        result = posixpath.normpath(posixpath.join(posixpath.dirname(page), stem + self.extension_for(page, extension)))
        # "/index" is relative to the templates dir, never the filesystem root
        result = result.lstrip("/")
        self.cache.set(key, result)
        return result

    def template_path(self, page: str) -> Path:
        """Absolute path of a resolved page."""
        return self.templates_dir / page

    def exists(self, page: str, extension: str) -> bool:
        """Whether the page resolves to an accessible file."""
        return self.template_path(self.resolve(page, extension)).is_file()
