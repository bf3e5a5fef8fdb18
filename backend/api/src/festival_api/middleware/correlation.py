"""Request tracing for the reservation API.

Every request runs under a correlation ID taken from ``X-Correlation-ID``
(or generated), which the structured log formatter prefixes to each line
and which is echoed back on the response. One access line is logged per
request with method, path, status and duration.

Exceptions that escape the routes (for example a dependency that cannot
be built) are logged here once and answered with the standard 500 body,
so the response still carries the correlation header.
"""

import time

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from festival_shared.models.errors import ErrorCode, ErrorResponse
from festival_shared.utils.logging import (
    clear_correlation_id,
    get_logger,
    set_correlation_id,
)

CORRELATION_ID_HEADER = "X-Correlation-ID"

logger = get_logger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID to the request and log its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
        inicio = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception:
                logger.exception("Unhandled exception on %s", request.url.path)
                response = JSONResponse(
                    status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                    content=ErrorResponse.from_code(ErrorCode.ERROR_INTERNO).model_dump(
                        mode="json"
                    ),
                )
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                (time.perf_counter() - inicio) * 1000,
                extra={"status_code": response.status_code},
            )
            return response
        finally:
            clear_correlation_id()
