"""Liquid adapter built on python-liquid.

Besides the templates directory, pages can be served from extra template
roots given by the ``root`` engine option.
"""

import posixpath
from pathlib import Path
from typing import Any

from fastapi_view.engines.base import EngineRenderer


class LiquidRenderer(EngineRenderer):
    name = "liquid"
    extension = "liquid"

    def configure(self) -> None:
        options = dict(self.engine_options)
        roots = options.pop("root", None) or []
        if isinstance(roots, str | Path):
            roots = [roots]
        self.root_names = [posixpath.normpath(str(root)) for root in roots]
        self.roots = [Path(root).resolve() for root in roots]

        search_path = [str(path) for path in (*self.roots, self.templates_dir)]
        options.setdefault("loader", self.module.FileSystemLoader(search_path))
        self.environment = self.configured(self.module.Environment(**options))

    def locate(self, page: str) -> Path:
        """Find the file for a page.

        A page that already names one of the roots is taken as relative to
        the templates directory; otherwise the first root holding the page
        wins, falling back to the templates directory.
        """
        root_included = any(name in page for name in self.root_names)
        if not root_included:
            for root in self.roots:
                candidate = root / page
                if candidate.is_file():
                    return candidate

        return self.ensure_exists(page)

    def compile_source(self, page: str, source: str) -> Any:
        return self.environment.from_string(source)

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        path = self.locate(page)
        template = await self.read_template(str(path), path)
        return await template.render_async(**data)
