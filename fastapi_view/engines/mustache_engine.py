"""Mustache adapter built on chevron."""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer


class MustacheRenderer(EngineRenderer):
    name = "mustache"
    extension = "mustache"
    supports_layout = True

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        template = await self.read_template(page)
        options = dict(self.engine_options)
        # Partials missing from partials_dict are looked up in partials_path
        options.setdefault("partials_path", str(self.templates_dir))
        options.setdefault("partials_ext", self.resolver.default_extension(self.extension))
        options["partials_dict"] = {**options.get("partials_dict", {}), **await self.read_partials(page, partials)}

        return await run_in_threadpool(self.module.render, template, data, **options)
