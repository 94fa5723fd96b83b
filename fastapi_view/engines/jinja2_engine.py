"""Jinja2 adapter, rendering through ``Template.render_async``."""

from types import ModuleType
from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer
from fastapi_view.exceptions import TemplateNotFoundException


class Jinja2Renderer(EngineRenderer):
    """Renders with one async-enabled ``jinja2.Environment``.

    The environment loads templates from the templates directory and keeps
    its own compiled-template cache, sized like the view cache.
    """

    name = "jinja2"
    extension = "j2"
    supports_layout = True

    #: Jinja2 extensions always loaded by this adapter
    jinja_extensions: tuple[str, ...] = ()

    @property
    def jinja2(self) -> ModuleType:
        return self.module

    def configure(self) -> None:
        jinja2 = self.jinja2
        options = dict(self.engine_options)
        options.setdefault("loader", jinja2.FileSystemLoader(str(self.templates_dir), encoding=self.charset))
        options.setdefault("autoescape", True)
        options.setdefault("auto_reload", not self.production)
        options.setdefault("cache_size", self.options.max_cache)
        # render_async needs it
        options["enable_async"] = True
        options["extensions"] = [*self.jinja_extensions, *options.get("extensions", [])]

        self.environment = self.configured(jinja2.Environment(**options))

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        try:
            template = await run_in_threadpool(self.environment.get_template, page)
            return await template.render_async(data)
        except self.jinja2.TemplateNotFound as e:
            raise TemplateNotFoundException(page, details={"missing": e.name}) from e
