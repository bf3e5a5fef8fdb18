"""Pydantic models for festival reservation data entities."""

from .alumno import Alumno
from .enums import EstadoReserva, Funcion, Zona
from .errors import ERROR_MESSAGES, ErrorCode, ErrorResponse, ReservaError
from .reserva import (
    AlumnoResumen,
    AsientoOcupado,
    AsientosDisponibles,
    Reserva,
    ReservaResumen,
    ResumenReservas,
)

__all__ = [
    # Enums
    "EstadoReserva",
    "Funcion",
    "Zona",
    # Alumno
    "Alumno",
    # Reserva
    "Reserva",
    "AsientoOcupado",
    "AsientosDisponibles",
    "ReservaResumen",
    "AlumnoResumen",
    "ResumenReservas",
    # Errors
    "ErrorCode",
    "ErrorResponse",
    "ReservaError",
    "ERROR_MESSAGES",
]
