"""Unit tests for HTML minification."""

from fastapi_view.minify import HtmlMinifier


def test_disabled_without_minifier():
    """Test output is untouched when no minifier is configured."""
    minifier = HtmlMinifier()

    assert not minifier.enabled
    assert minifier("<p>\n</p>") == "<p>\n</p>"


def test_minifies_with_options(fake_minifier):
    """Test the minifier receives the configured options."""
    minifier = HtmlMinifier(fake_minifier, {"keep_comments": False})

    assert minifier("<div>\n<p>x</p>\n</div>", "/") == "<div><p>x</p></div>"
    assert fake_minifier.calls == [{"keep_comments": False}]


def test_excluded_path_is_not_minified(fake_minifier):
    """Test requests to excluded paths keep their output."""
    minifier = HtmlMinifier(fake_minifier, excluded_paths=["/raw"])

    assert minifier("<div>\n<p>x</p>\n</div>", "/raw") == "<div>\n<p>x</p>\n</div>"
    assert minifier.applies_to("/other")
    assert fake_minifier.calls == []


def test_minifies_outside_requests(fake_minifier):
    """Test renders without a request path are minified."""
    minifier = HtmlMinifier(fake_minifier, excluded_paths=["/raw"])

    assert minifier.applies_to(None)


def test_object_without_minify_is_ignored():
    """Test a value without a minify callable disables minification."""
    assert not HtmlMinifier(object()).enabled
