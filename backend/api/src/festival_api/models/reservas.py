"""API models for reservation endpoints.

The POST endpoints share one body, ``{"idAlumno": ..., "soloUsuario": ...}``.
Presence of ``idAlumno`` is checked by the route before validation so a
missing id is answered with 400; anything this model rejects after that
is an internal error.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from festival_shared.models.reserva import ResumenReservas

_ENTERO = re.compile(r"[+-]?\d+")


def is_missing_id(value: Any) -> bool:
    """True for the values a client sends when it has no student id.

    That is: absent/None, empty string, 0 and false.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0
    return False


def parse_id_alumno(value: Any) -> int:
    """Coerce a JSON id (number or numeric string) to an int.

    Raises:
        ValueError: For booleans, non-integral floats, non-numeric
            strings and any other type.
    """
    if isinstance(value, bool):
        raise ValueError("idAlumno must be a number, not a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"idAlumno must be an integer, got {value!r}")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not _ENTERO.fullmatch(text):
            raise ValueError(f"idAlumno is not numeric: {value!r}")
        return int(text)
    raise ValueError(f"idAlumno has unsupported type {type(value).__name__}")


class ConsultaAsientos(BaseModel):
    """Request body for the remaining-seats lookup.

    Only idAlumno is read; any other field is ignored.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"examples": [{"idAlumno": 12345}]},
    )

    id_alumno: int = Field(
        ...,
        alias="idAlumno",
        description="Student control number (number or numeric string)",
    )

    @field_validator("id_alumno", mode="before")
    @classmethod
    def _coerce_id_alumno(cls, value: Any) -> int:
        return parse_id_alumno(value)


class ConsultaAlumno(ConsultaAsientos):
    """Request body for payment and reservation lookups."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"idAlumno": 12345},
                {"idAlumno": "12345", "soloUsuario": True},
            ]
        },
    )

    solo_usuario: bool = Field(
        default=False,
        alias="soloUsuario",
        description="Only the caller's own records instead of the whole function",
    )

    @field_validator("solo_usuario", mode="before")
    @classmethod
    def _default_solo_usuario(cls, value: Any) -> Any:
        return False if value is None else value


class ResumenReservasResponse(BaseModel):
    """Success wrapper for the reservation summary."""

    success: bool = True
    data: ResumenReservas
