"""Tornado template adapter."""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class TornadoRenderer(EngineRenderer):
    name = "tornado"
    extension = "html"

    def configure(self) -> None:
        self.loader = self.configured(self.submodule("template").Loader(str(self.templates_dir), **self.engine_options))

    def reset(self) -> None:
        self.loader.reset()

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        self.ensure_exists(page)

        def invoke() -> bytes:
            if not self.production:
                self.loader.reset()
            return self.loader.load(page).generate(**data)

        output = await run_in_threadpool(invoke)
        # Tornado always generates UTF-8
        return output.decode("utf-8")
