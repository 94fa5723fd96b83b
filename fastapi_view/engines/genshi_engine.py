"""Genshi markup template adapter."""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class GenshiRenderer(EngineRenderer):
    name = "genshi"
    extension = "html"

    def configure(self) -> None:
        options = dict(self.engine_options)
        self.method = options.pop("method", "html")
        self.doctype = options.pop("doctype", None)
        options.setdefault("auto_reload", not self.production)
        options.setdefault("default_encoding", self.charset)
        self.loader = self.configured(self.submodule("template").TemplateLoader([str(self.templates_dir)], **options))

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        self.ensure_exists(page)

        def invoke() -> str:
            template = self.loader.load(page)
            return template.generate(**data).render(self.method, doctype=self.doctype)

        return await run_in_threadpool(invoke)
