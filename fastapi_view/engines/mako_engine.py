"""Mako adapter: templates are compiled once and invoked per render."""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class MakoRenderer(EngineRenderer):
    name = "mako"
    extension = "mako"
    supports_layout = True

    def configure(self) -> None:
        self.template_module = self.submodule("template")
        # Resolves <%include> and <%inherit> relative to the templates dir
        self.lookup = self.configured(
            self.submodule("lookup").TemplateLookup(
                directories=[str(self.templates_dir)],
                filesystem_checks=not self.production,
                input_encoding=self.charset,
            )
        )

    def compile_source(self, page: str, source: str) -> Any:
        options = dict(self.engine_options)
        options.setdefault("lookup", self.lookup)
        options.setdefault("uri", page)
        return self.template_module.Template(text=source, **options)

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        template = await self.read_template(page)
        return await run_in_threadpool(template.render, **data)
