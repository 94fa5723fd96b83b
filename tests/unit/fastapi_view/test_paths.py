"""Unit tests for page resolution."""

from pathlib import Path

from fastapi_view.cache import TemplateCache
from fastapi_view.paths import PageResolver


def make_resolver(**kwargs) -> PageResolver:
    return PageResolver(Path("/srv/templates"), TemplateCache(10), **kwargs)


class TestPageResolver:
    """Tests for PageResolver."""

    def test_appends_default_extension(self):
        """Test a page without extension gets the engine extension."""
        assert make_resolver().resolve("index", "hbs") == "index.hbs"

    def test_keeps_page_extension(self):
        """Test a page with an extension is kept as is."""
        assert make_resolver().resolve("index.html", "hbs") == "index.html"

    def test_view_ext_wins(self):
        """Test view_ext replaces whatever extension the page has."""
        resolver = make_resolver(view_ext="tpl")

        assert resolver.resolve("index", "hbs") == "index.tpl"
        assert resolver.resolve("index.html", "hbs") == "index.tpl"
        assert resolver.default_extension("hbs") == "tpl"

    def test_include_view_extension(self):
        """Test include_view_extension forces the engine extension."""
        resolver = make_resolver(include_view_extension=True)

        assert resolver.resolve("index", "mako") == "index.mako"
        assert resolver.resolve("index.html", "mako") == "index.mako"

    def test_keeps_and_normalises_directories(self):
        """Test directories are kept and dot segments removed."""
        resolver = make_resolver()

        assert resolver.resolve("./partials/header", "mustache") == "partials/header.mustache"
        assert resolver.resolve("pages/../index", "mustache") == "index.mustache"

    def test_resolution_is_cached(self):
        """Test resolved names are memoised under a getPage key."""
        resolver = make_resolver()
        resolver.resolve("index", "j2")

        assert resolver.cache.get("getPage-index-j2") == "index.j2"

    def test_template_path(self):
        """Test resolved pages are joined to the templates directory."""
        assert make_resolver().template_path("a/b.j2") == Path("/srv/templates/a/b.j2")

    def test_exists(self, templates_dir):
        """Test existence checks use the resolved file."""
        resolver = PageResolver(templates_dir / "mustache", TemplateCache(10))

        assert resolver.exists("layout", "mustache")
        assert not resolver.exists("nope", "mustache")

    def test_leading_slash_stays_in_templates_dir(self):
        """Test a page starting with a slash is relative to the templates directory."""
        resolver = make_resolver()

        assert resolver.resolve("/index", "mako") == "index.mako"
        assert resolver.resolve("/pages/../index", "mako") == "index.mako"
        assert resolver.template_path(resolver.resolve("/index", "mako")) == Path("/srv/templates/index.mako")
