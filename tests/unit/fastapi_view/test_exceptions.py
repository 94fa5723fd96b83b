"""Tests for custom exception classes."""

from fastapi_view.exceptions import (
    ConfigurationException,
    ErrorCode,
    LayoutConflictException,
    LayoutNotFoundException,
    LayoutUnsupportedException,
    MissingEngineException,
    MissingPageException,
    TemplateNotFoundException,
    TemplateRenderException,
    UnsupportedEngineException,
    ViewException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.VIEW_ERROR == "VIEW_ERROR"
        assert ErrorCode.MISSING_ENGINE == "MISSING_ENGINE"
        assert ErrorCode.MISSING_PAGE == "MISSING_PAGE"
        assert ErrorCode.LAYOUT_CONFLICT == "LAYOUT_CONFLICT"


class TestViewException:
    """Tests for ViewException."""

    def test_view_exception_basic(self):
        """Test creating basic view exception."""
        exc = ViewException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.VIEW_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_view_exception_with_details(self):
        """Test view exception with details."""
        exc = ViewException(
            message="Test error", code=ErrorCode.CONFIG_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.CONFIG_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestRegistrationExceptions:
    """Tests for errors raised while registering views."""

    def test_missing_engine(self):
        """Test the missing engine message."""
        exc = MissingEngineException()

        assert isinstance(exc, ConfigurationException)
        assert exc.message == "Missing engine"
        assert exc.code == ErrorCode.MISSING_ENGINE

    def test_unsupported_engine(self):
        """Test the unsupported engine message names the engine."""
        exc = UnsupportedEngineException("blade", ("jinja2", "mako"))

        assert exc.message == "'blade' is not yet supported. Supported engines: jinja2, mako"
        assert exc.details == {"engine": "blade"}

    def test_layout_unsupported(self):
        """Test the layout message lists the engines with layout support."""
        exc = LayoutUnsupportedException("tornado", ("handlebars", "jinja2", "mako"))

        assert exc.message == 'Only handlebars, jinja2 and mako support the "layout" option'

    def test_layout_not_found(self):
        """Test the inaccessible layout message."""
        exc = LayoutNotFoundException("layout.hbs")

        assert exc.message == 'unable to access template "layout.hbs"'
        assert exc.code == ErrorCode.LAYOUT_NOT_FOUND


class TestRenderExceptions:
    """Tests for errors raised while rendering."""

    def test_missing_page(self):
        """Test the missing page message."""
        assert MissingPageException().message == "Missing page"

    def test_layout_conflict(self):
        """Test the layout conflict message."""
        assert LayoutConflictException().message == "A layout can either be set globally or on render, not both."

    def test_template_not_found(self):
        """Test the page is part of the details."""
        exc = TemplateNotFoundException("index.j2")

        assert exc.code == ErrorCode.TEMPLATE_NOT_FOUND
        assert exc.details["page"] == "index.j2"

    def test_template_render_error(self):
        """Test the engine error is described."""
        exc = TemplateRenderException("index.j2", ValueError("boom"))

        assert exc.message == "Failed to render template index.j2: boom"
        assert exc.details == {"page": "index.j2", "error_type": "ValueError"}
