"""Exception handlers for view errors."""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from fastapi_view.exceptions import ViewException
from fastapi_view.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


async def view_exception_handler(request: Request, exc: ViewException) -> JSONResponse:
    """Handle view exceptions with proper HTTP status codes.

    Returns structured JSON error responses with error code, message and
    optional details.
    """
    log_with_context(
        logger,
        "warning",
        "View error",
        error_code=exc.code.value,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="view_error",
    )
    if exc.__cause__ is not None:
        logger.debug("View error cause:", exc_info=exc.__cause__)

    error_content: dict[str, Any] = {"code": exc.code.value, "message": exc.message, "details": exc.details}

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error_content},
    )


def register_error_handlers(app) -> None:
    """Register the view exception handler with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(ViewException, view_exception_handler)
