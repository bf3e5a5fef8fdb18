"""Reservation models: stored seat rows and the read-side projections."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Reserva(BaseModel):
    """A seat row in the reservas table.

    ``estado`` is kept as a plain string: legacy rows use ``pago`` as well
    as the EstadoReserva values.
    """

    reserva_id: str = Field(..., description="Unique row ID")
    fila: str = Field(..., description="Seat row letter(s)")
    asiento: int = Field(..., description="Seat number within the row")
    estado: str = Field(..., description="disponible, reservado or pagado")
    referencia: int = Field(..., description="Student control number holding the seat")
    nivel: int = Field(..., description="Seat-map level the seat belongs to")
    precio: int = Field(default=0, ge=0, description="Seat price in MXN")
    zona: str | None = Field(default=None, description="Zone name")
    zoi: str | None = Field(default=None, description="Zone-of-interest code")
    fecha_pago: str | None = Field(
        default=None, description="Payment deadline (YYYY-MM-DD)"
    )
    fecha_reserva: str | None = Field(
        default=None, description="Reservation timestamp (ISO 8601)"
    )


class AsientoOcupado(BaseModel):
    """A taken seat on the seat map."""

    model_config = ConfigDict(strict=True)

    fila: str
    asiento: int


class AsientosDisponibles(BaseModel):
    """How many more seats a student may still reserve."""

    model_config = ConfigDict(strict=True)

    asientos: int = Field(..., ge=0)


class ReservaResumen(BaseModel):
    """One of the caller's reservations as shown on the receipt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    seccion: str
    fila: str
    asiento: int
    precio: int
    fecha_reserva: str = Field(..., description="Formatted d/m/yyyy")
    fecha_pago: str | None = None
    pagado: bool
    estado: str


class AlumnoResumen(BaseModel):
    """Student header of the reservation summary."""

    nombre: str
    control: str
    funcion: str


class ResumenReservas(BaseModel):
    """Reservation summary for one student."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    alumno: AlumnoResumen
    reservas: list[ReservaResumen]
    total: int
    fecha_reserva: str
    fecha_pago: str | None = None
