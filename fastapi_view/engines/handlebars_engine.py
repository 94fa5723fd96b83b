"""Handlebars adapter built on pybars3.

Sources are compiled when read, so the cache holds compiled templates.
Partials are compiled too and handed to the template on every call, along
with the configured helpers.
"""

from typing import Any

from starlette.concurrency import run_in_threadpool

from fastapi_view.engines.base import EngineRenderer
from fastapi_view.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class HandlebarsRenderer(EngineRenderer):
    name = "handlebars"
    extension = "hbs"
    supports_layout = True

    def configure(self) -> None:
        self.compiler = self.configured(self.module.Compiler())
        self.helpers: dict[str, Any] = dict(self.options.helpers)
        self._global_partials: dict[str, Any] | None = None

    def compile_source(self, page: str, source: str) -> Any:
        return self.compiler.compile(source)

    def compile_partials(self, sources: dict[str, str]) -> dict[str, Any]:
        return {name: self.compiler.compile(source) for name, source in sources.items()}

    def warm_up(self) -> None:
        """Compile the global partials once when running in production."""
        if not (self.production and self.options.partials):
            return

        sources = {
            name: self.read_file(self.resolver.template_path(path)) for name, path in self.options.partials.items()
        }
        self.cache.set(f"{self.name}-Partials", sources)
        self._global_partials = self.compile_partials(sources)
        log_with_context(
            logger,
            "info",
            "Registered global partials",
            engine=self.name,
            partials=sorted(sources),
            event_type="partials_registered",
        )

    async def global_partials(self) -> dict[str, Any]:
        if self.production and self._global_partials is not None:
            return self._global_partials

        compiled = self.compile_partials(await self.read_partials(self.name, self.options.partials))
        if self.production:
            self._global_partials = compiled
        return compiled

    async def render_page(self, page: str, data: dict[str, Any], partials: dict[str, str]) -> str:
        template = await self.read_template(page)
        compiled_partials = await self.global_partials()
        if partials:
            compiled_partials = {**compiled_partials, **self.compile_partials(await self.read_partials(page, partials))}

        def invoke() -> str:
            return str(template(data, helpers=self.helpers, partials=compiled_partials))

        return await run_in_threadpool(invoke)
