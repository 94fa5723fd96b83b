"""Pug adapter: pypugjs preprocesses ``.pug`` files for a Jinja2 environment."""

from types import ModuleType

import jinja2

from fastapi_view.engines.jinja2_engine import Jinja2Renderer


class PugRenderer(Jinja2Renderer):
    name = "pug"
    extension = "pug"
    supports_layout = False

    @property
    def jinja2(self) -> ModuleType:
        return jinja2

    @property
    def jinja_extensions(self) -> tuple[str, ...]:
        return (f"{self.module.__name__}.ext.jinja.PyPugJSExtension",)
