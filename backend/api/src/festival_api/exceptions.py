"""FastAPI exception handlers for converting ReservaError to HTTP responses.

Every failure is rendered as ``{"success": false, "message": "..."}`` with
a status derived from the error code:
- 400 Bad Request: Required identifier missing
- 404 Not Found: Student does not exist
- 500 Internal Server Error: Anything unexpected (already logged by the route)

Usage:
    Register handlers in FastAPI app:

    from festival_api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from festival_shared.models.errors import ErrorCode, ReservaError
from festival_shared.utils.logging import get_logger

logger = get_logger(__name__)

# Map ErrorCode to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.ALUMNO_REQUERIDO: HTTP_400_BAD_REQUEST,
    ErrorCode.REFERENCIA_REQUERIDA: HTTP_400_BAD_REQUEST,
    ErrorCode.ALUMNO_NO_ENCONTRADO: HTTP_404_NOT_FOUND,
    ErrorCode.ERROR_INTERNO: HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode.

    Args:
        code: The ErrorCode to map

    Returns:
        HTTP status code, defaults to 500 if not explicitly mapped.
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_500_INTERNAL_SERVER_ERROR)


async def reserva_error_handler(request: Request, exc: ReservaError) -> JSONResponse:
    """Handle ReservaError exceptions and convert to JSON response.

    Args:
        request: The incoming request
        exc: The ReservaError exception

    Returns:
        JSONResponse with the error body and mapped status code.
    """
    status_code = get_http_status_for_error(exc.code)
    logger.warning(
        "%s %s -> %d %s details=%s",
        request.method,
        request.url.path,
        status_code,
        exc.code.value,
        exc.details,
        extra={"error_code": exc.code.value},
    )
    return JSONResponse(
        status_code=status_code,
        content=exc.to_error_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    app.add_exception_handler(ReservaError, reserva_error_handler)  # type: ignore[arg-type]
