"""Velocity adapter built on airspeed.

Templates are compiled when read; ``#parse`` and ``#include`` go through a
file loader rooted at the templates directory.
"""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class VelocityRenderer(EngineRenderer):
    name = "velocity"
    extension = "vm"

    def configure(self) -> None:
        self.loader = self.configured(self.module.CachingFileLoader(str(self.templates_dir)))

    def compile_source(self, page: str, source: str) -> Any:
        return self.module.Template(source, filename=page)

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        template = await self.read_template(page)
        return await run_in_threadpool(template.merge, data, loader=self.loader)
