"""Custom exceptions for view rendering with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    VIEW_ERROR = "VIEW_ERROR"

    # Registration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    MISSING_ENGINE = "MISSING_ENGINE"
    UNSUPPORTED_ENGINE = "UNSUPPORTED_ENGINE"

    # Template errors
    MISSING_PAGE = "MISSING_PAGE"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

    # Layout errors
    LAYOUT_UNSUPPORTED = "LAYOUT_UNSUPPORTED"
    LAYOUT_NOT_FOUND = "LAYOUT_NOT_FOUND"
    LAYOUT_CONFLICT = "LAYOUT_CONFLICT"


class ViewException(Exception):
    """Base exception for view errors with HTTP status code support.

    All custom exceptions inherit from this class so a single exception
    handler can turn them into error responses.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationException(ViewException):
    """Invalid view options detected at registration."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class MissingEngineException(ConfigurationException):
    """No engine was given in the options."""

    def __init__(self, message: str = "Missing engine", details: dict[str, Any] | None = None):
        super().__init__(message, code=ErrorCode.MISSING_ENGINE, details=details)


class UnsupportedEngineException(ConfigurationException):
    """The engine name is not one of the supported engines."""

    def __init__(self, engine: str, supported: tuple[str, ...]):
        super().__init__(
            f"'{engine}' is not yet supported. Supported engines: {', '.join(supported)}",
            code=ErrorCode.UNSUPPORTED_ENGINE,
            details={"engine": engine},
        )


class LayoutUnsupportedException(ConfigurationException):
    """A layout was requested for an engine without layout support."""

    def __init__(self, engine: str, layout_engines: tuple[str, ...]):
        names = ", ".join(layout_engines[:-1]) + f" and {layout_engines[-1]}"
        super().__init__(
            f'Only {names} support the "layout" option',
            code=ErrorCode.LAYOUT_UNSUPPORTED,
            details={"engine": engine},
        )


class LayoutNotFoundException(ConfigurationException):
    """The layout file cannot be accessed."""

    def __init__(self, layout: str):
        super().__init__(
            f'unable to access template "{layout}"',
            code=ErrorCode.LAYOUT_NOT_FOUND,
            details={"layout": layout},
        )


class LayoutConflictException(ViewException):
    """A layout was given on render while a global layout is configured."""

    def __init__(self, message: str = "A layout can either be set globally or on render, not both."):
        super().__init__(message, code=ErrorCode.LAYOUT_CONFLICT)


class MissingPageException(ViewException):
    """Render was called without a page."""

    def __init__(self, message: str = "Missing page"):
        super().__init__(message, code=ErrorCode.MISSING_PAGE)


class TemplateNotFoundException(ViewException):
    """Template file could not be found or read."""

    def __init__(self, page: str, details: dict[str, Any] | None = None):
        super().__init__(
            f'unable to access template "{page}"',
            code=ErrorCode.TEMPLATE_NOT_FOUND,
            details={"page": page, **(details or {})},
        )


class TemplateRenderException(ViewException):
    """The template engine failed to compile or render a page."""

    def __init__(self, page: str, error: Exception):
        super().__init__(
            f"Failed to render template {page}: {error}",
            code=ErrorCode.TEMPLATE_RENDER_ERROR,
            details={"page": page, "error_type": type(error).__name__},
        )
