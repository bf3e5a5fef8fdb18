"""Reservation endpoints for the festival seat map.

Provides REST endpoints for:
- Remaining seats a student may still reserve
- Paid seats on the student's seat map (optionally only the caller's)
- Reserved seats on the student's seat map (optionally only the caller's)
- The caller's reservation summary (receipt view)

The POST endpoints take ``{"idAlumno": ..., "soloUsuario": ...}`` and
return the model result verbatim. A missing ``idAlumno`` is a 400; any
failure after that (malformed JSON, non-numeric id, data-access error)
is logged and answered with a generic 500.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from fastapi import APIRouter, Depends, Query, Request

from festival_api.dependencies import get_reserva_model, get_route_logger
from festival_api.models.common import ErrorResponse
from festival_api.models.reservas import (
    ConsultaAlumno,
    ConsultaAsientos,
    ResumenReservasResponse,
    is_missing_id,
    parse_id_alumno,
)
from festival_shared.models.errors import ErrorCode, ReservaError
from festival_shared.services.reserva_model import ReservaModel

router = APIRouter(tags=["reservas"])

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "idAlumno is missing"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}

C = TypeVar("C", bound=ConsultaAsientos)


def _request_body(modelo: type[ConsultaAsientos]) -> dict[str, Any]:
    """OpenAPI requestBody for routes that read the raw JSON body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": modelo.model_json_schema()}},
        }
    }


async def _leer_consulta(request: Request, modelo: type[C]) -> C:
    """Read and validate the JSON body of a lookup request.

    Raises:
        ReservaError: ALUMNO_REQUERIDO when idAlumno is absent or empty.
        ValueError: Malformed JSON or an idAlumno that is not an integer.
    """
    body = await request.json()
    if not isinstance(body, dict) or is_missing_id(body.get("idAlumno")):
        raise ReservaError(ErrorCode.ALUMNO_REQUERIDO)
    return modelo.model_validate(body)


async def _consultar(
    request: Request,
    logger: logging.Logger,
    descripcion: str,
    modelo: type[C],
    operacion: Callable[[C], Any],
) -> Any:
    """Run a model lookup under the shared validation/error contract."""
    try:
        consulta = await _leer_consulta(request, modelo)
        return operacion(consulta)
    except ReservaError:
        raise
    except Exception as exc:
        logger.exception("Error al obtener %s", descripcion)
        raise ReservaError(
            ErrorCode.ERROR_INTERNO, details={"error": type(exc).__name__}
        ) from exc


@router.post(
    "/reservas/asientos-disponibles",
    summary="Remaining seats for a student",
    description="""
How many more seats the student's family may reserve.

**Notes:**
- Quota depends on school level; every seat the student already holds counts
- Unknown students get `{"asientos": 0}`
""",
    response_model=None,
    openapi_extra=_request_body(ConsultaAsientos),
    responses={
        200: {
            "description": "Remaining seats",
            "content": {"application/json": {"example": {"asientos": 3}}},
        },
        **ERROR_RESPONSES,
    },
)
async def asientos_disponibles(
    request: Request,
    model: ReservaModel = Depends(get_reserva_model),
    logger: logging.Logger = Depends(get_route_logger),
) -> Any:
    return await _consultar(
        request,
        logger,
        "asientos disponibles",
        ConsultaAsientos,
        lambda consulta: model.get_asientos_disponibles(consulta.id_alumno),
    )


@router.post(
    "/reservas/pagos",
    summary="Paid seats",
    description="""
Seats already paid on the student's seat map.

With `soloUsuario: true` only the caller's own paid seats are returned;
otherwise every paid seat of the function.
""",
    response_model=None,
    openapi_extra=_request_body(ConsultaAlumno),
    responses={
        200: {
            "description": "Paid seats",
            "content": {
                "application/json": {"example": [{"fila": "A", "asiento": 12}]}
            },
        },
        **ERROR_RESPONSES,
    },
)
async def pagos(
    request: Request,
    model: ReservaModel = Depends(get_reserva_model),
    logger: logging.Logger = Depends(get_route_logger),
) -> Any:
    return await _consultar(
        request,
        logger,
        "pagos",
        ConsultaAlumno,
        lambda consulta: model.get_pagos(consulta.id_alumno, consulta.solo_usuario),
    )


@router.post(
    "/reservas/reservas",
    summary="Reserved seats",
    description="""
Seats reserved (not yet paid) on the student's seat map.

With `soloUsuario: true` only the caller's own reservations are returned;
otherwise every reserved seat of the function.
""",
    response_model=None,
    openapi_extra=_request_body(ConsultaAlumno),
    responses={
        200: {
            "description": "Reserved seats",
            "content": {
                "application/json": {"example": [{"fila": "B", "asiento": 4}]}
            },
        },
        **ERROR_RESPONSES,
    },
)
async def reservas(
    request: Request,
    model: ReservaModel = Depends(get_reserva_model),
    logger: logging.Logger = Depends(get_route_logger),
) -> Any:
    return await _consultar(
        request,
        logger,
        "reservas",
        ConsultaAlumno,
        lambda consulta: model.get_reservas(consulta.id_alumno, consulta.solo_usuario),
    )


@router.get(
    "/reservas",
    summary="Reservation summary",
    description="""
Receipt view of the student's active reservations: student header with
assigned function, each seat with section and price, total, and the
payment deadline.
""",
    response_model=ResumenReservasResponse,
    responses={
        400: {"model": ErrorResponse, "description": "alumno_ref is missing"},
        404: {"model": ErrorResponse, "description": "Student not found"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def resumen_reservas(
    alumno_ref: str | None = Query(
        default=None,
        description="Student control number",
        examples=["12345"],
    ),
    model: ReservaModel = Depends(get_reserva_model),
    logger: logging.Logger = Depends(get_route_logger),
) -> ResumenReservasResponse:
    if not alumno_ref:
        raise ReservaError(ErrorCode.REFERENCIA_REQUERIDA)

    try:
        resumen = model.get_resumen_reservas(parse_id_alumno(alumno_ref))
    except Exception as exc:
        logger.exception("Error en resumen de reservas")
        raise ReservaError(
            ErrorCode.ERROR_INTERNO, details={"error": type(exc).__name__}
        ) from exc

    if resumen is None:
        raise ReservaError(
            ErrorCode.ALUMNO_NO_ENCONTRADO, details={"alumno_ref": alumno_ref}
        )

    return ResumenReservasResponse(data=resumen)
