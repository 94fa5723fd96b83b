"""Chameleon page template adapter."""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class ChameleonRenderer(EngineRenderer):
    name = "chameleon"
    extension = "pt"

    def configure(self) -> None:
        options = dict(self.engine_options)
        options.setdefault("auto_reload", not self.production)
        self.loader = self.configured(self.module.PageTemplateLoader(str(self.templates_dir), **options))

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        self.ensure_exists(page)

        def invoke() -> str:
            return self.loader.load(page)(**data)

        return await run_in_threadpool(invoke)
