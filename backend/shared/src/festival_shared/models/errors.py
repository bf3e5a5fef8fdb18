"""Standard error codes for the festival reservation API.

Every failed request is answered with the same two-field body,
``{"success": false, "message": "..."}``. Messages are fixed per code so
that no internal detail reaches the client.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Error codes raised by route handlers."""

    ALUMNO_REQUERIDO = "ERR_001"
    REFERENCIA_REQUERIDA = "ERR_002"
    ALUMNO_NO_ENCONTRADO = "ERR_003"
    ERROR_INTERNO = "ERR_500"


# Human-readable error messages (client facing, Spanish)
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.ALUMNO_REQUERIDO: "ID del alumno es requerido",
    ErrorCode.REFERENCIA_REQUERIDA: "Referencia del alumno es requerida",
    ErrorCode.ALUMNO_NO_ENCONTRADO: "Alumno no encontrado",
    ErrorCode.ERROR_INTERNO: "Error interno del servidor",
}


class ErrorResponse(BaseModel):
    """Error body returned by every endpoint on failure."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    message: str

    @classmethod
    def from_code(cls, code: ErrorCode) -> "ErrorResponse":
        """Create an ErrorResponse carrying the fixed message for a code."""
        return cls(message=ERROR_MESSAGES[code])


class ReservaError(Exception):
    """Exception raised by reservation endpoints.

    Converted to an ErrorResponse by the API exception handler.
    """

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        # Server-side context only, never serialized to the client
        self.details = details
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to the client-facing error body."""
        return ErrorResponse.from_code(self.code)
