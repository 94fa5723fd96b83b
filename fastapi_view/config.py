"""Options for the view renderer."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewSettings(BaseSettings):
    """View options that can be provided through the environment.

    Every field can be set with a ``VIEW_`` prefixed environment variable
    (``VIEW_PRODUCTION=true``, ``VIEW_MAX_CACHE=500``) or a ``.env`` file.
    """

    charset: str = Field(default="utf-8", min_length=1, description="Charset of rendered responses")
    include_view_extension: bool = Field(default=False, description="Always append the engine extension")
    max_cache: int = Field(default=100, ge=1, description="Capacity of the template LRU cache")
    production: bool = Field(default=False, description="Serve compiled templates from the cache")
    property_name: str = Field(default="view", min_length=1, description="Attribute name for the view decorator")
    root: Path | None = Field(default=None, description="Templates directory, wins over 'templates'")
    templates: Path = Field(default=Path("."), description="Templates directory relative to the CWD")
    view_ext: str = Field(default="", description="Forced template file extension (without dot)")
    layout: str | None = Field(default=None, description="Global layout template")

    model_config = SettingsConfigDict(
        env_prefix="VIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("view_ext", mode="after")
    @classmethod
    def validate_view_ext(cls, v: str) -> str:
        """Strip a leading dot so 'html' and '.html' are equivalent."""
        return v.strip().lstrip(".")

    @field_validator("property_name", mode="after")
    @classmethod
    def validate_property_name(cls, v: str) -> str:
        """Ensure property_name can be used as an attribute name."""
        v = v.strip()
        if not v.isidentifier():
            raise ValueError(f"property_name must be a valid identifier, got {v!r}")
        return v

    @property
    def templates_dir(self) -> Path:
        """Absolute directory templates are resolved against."""
        if self.root is not None:
            return self.root
        return self.templates.resolve()


class ViewOptions(ViewSettings):
    """Complete view options, including values that only make sense in code.

    Example:
        import jinja2

        options = ViewOptions(engine={"jinja2": jinja2}, templates="templates")
    """

    engine: dict[str, Any] = Field(default_factory=dict, description="Engine name mapped to the library module")
    default_context: dict[str, Any] = Field(default_factory=dict, description="Data merged under every render")
    options: dict[str, Any] = Field(default_factory=dict, description="Keyword options for the engine")
    partials: dict[str, str] = Field(default_factory=dict, description="Global partials (name -> template path)")
    helpers: dict[str, Callable[..., Any]] = Field(default_factory=dict, description="Global template helpers")
    on_configure: Callable[[Any], Any] | None = Field(
        default=None, description="Called once with the engine environment"
    )
    html_minifier: Any = Field(default=None, description="Object exposing minify(html, **options)")
    html_minifier_options: dict[str, Any] = Field(default_factory=dict, description="Keyword options for minify")
    paths_to_exclude_html_minifier: list[str] = Field(
        default_factory=list, description="Request paths whose output is not minified"
    )

    model_config = SettingsConfigDict(
        env_prefix="VIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    @property
    def engine_name(self) -> str | None:
        """Name of the configured engine (the first key of ``engine``)."""
        return next(iter(self.engine), None)

    @property
    def engine_module(self) -> Any:
        """Library module of the configured engine."""
        name = self.engine_name
        return self.engine[name] if name is not None else None
