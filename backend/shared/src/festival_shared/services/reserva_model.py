"""Reservation data access and read-side business rules.

ReservaModel answers the questions the seat-map screen asks:

- how many more seats a student may still reserve
- which seats of the student's function are already paid or reserved
- what the student's receipt (reservation summary) looks like

Ticket quotas depend on the student's school level. Grades 5 and 6 are
seated with secundaria, and a handful of test control numbers get fixed
levels and an effectively unlimited quota so staff can exercise the
full seat map.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from festival_shared.models.alumno import Alumno
from festival_shared.models.enums import EstadoReserva, Funcion, Zona
from festival_shared.models.reserva import (
    AlumnoResumen,
    AsientoOcupado,
    AsientosDisponibles,
    Reserva,
    ReservaResumen,
    ResumenReservas,
)
from festival_shared.services.dynamodb import DynamoDBService
from festival_shared.utils.logging import get_logger, log_reserva_operation

logger = get_logger(__name__)

FESTIVAL_TIMEZONE = ZoneInfo("America/Monterrey")

# Seats each family may reserve, by effective school level
BOLETOS_POR_NIVEL: dict[int, int] = {1: 8, 2: 8, 3: 4, 4: 3}

# Test control numbers and the seat-map level each one is pinned to
ALUMNOS_DE_PRUEBA: dict[int, int] = {22222: 2, 33333: 3, 44444: 4}
BOLETOS_ALUMNO_DE_PRUEBA = 1154

# Grades seated with secundaria regardless of stored level
GRADOS_SECUNDARIA = (5, 6)

NIVEL_POR_DEFECTO = 1

# zoi code -> (section label, default price)
SECCIONES_POR_ZOI: dict[str, tuple[str, int]] = {
    Zona.ORO_FRENTE.value: ("ZONA ORO", 180),
    Zona.ORO_PALCOS.value: ("ZONA ORO PALCOS", 180),
    Zona.PLATA_FRENTE.value: ("ZONA PLATA", 160),
    Zona.PLATA_PALCOS.value: ("ZONA PLATA PALCOS", 160),
    Zona.BRONCE_FRENTE.value: ("BRONCE PALCOS", 120),
    Zona.BRONCE_BALCON.value: ("BRONCE BALCÓN", 120),
}

ESTADOS_PAGADOS = frozenset({EstadoReserva.PAGADO.value, "pago"})


def resolve_funcion(nivel: int, grado: int) -> Funcion:
    """Map a student's level and grade to the festival show they attend."""
    if nivel in (1, 2):
        return Funcion.PRIMERA
    if nivel == 3:
        if 2 <= grado <= 5:
            return Funcion.SEGUNDA
        if grado == 6:
            return Funcion.TERCERA
        return Funcion.PRIMERA
    if nivel == 4:
        return Funcion.TERCERA
    return Funcion.DESCONOCIDA


def seccion_por_precio(precio: int) -> str:
    if precio >= 180:
        return "ZONA ORO"
    if precio >= 160:
        return "ZONA PLATA"
    if precio >= 120:
        return "BRONCE PALCOS"
    return "ZONA GENERAL"


def resolve_seccion(zoi: str | None, precio: int) -> tuple[str, int]:
    """Resolve the section label and effective price of a seat.

    Known zone codes fill in their default price when the row has none.
    Unknown or missing codes fall back to classifying by price.

    Returns:
        Tuple of (section label, price)
    """
    if zoi in SECCIONES_POR_ZOI:
        seccion, precio_base = SECCIONES_POR_ZOI[zoi]
        return seccion, precio or precio_base
    return seccion_por_precio(precio), precio


def format_fecha(value: date) -> str:
    """Format a date as es-MX short date (d/m/yyyy, no zero padding)."""
    return f"{value.day}/{value.month}/{value.year}"


def hoy_en_festival() -> date:
    """Today's date in the festival's local timezone."""
    return datetime.now(FESTIVAL_TIMEZONE).date()


def format_fecha_reserva(value: str | None) -> str:
    """Format a stored reservation timestamp for the receipt.

    Args:
        value: ISO 8601 date or datetime. Aware datetimes are converted to
            festival local time first.

    Returns:
        d/m/yyyy string; today's date when value is empty
    """
    if not value:
        return format_fecha(hoy_en_festival())

    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(FESTIVAL_TIMEZONE)
    return format_fecha(parsed.date())


class ReservaModel:
    """Read-side access to alumnos and reservas tables."""

    def __init__(self, db: DynamoDBService) -> None:
        self.db = db

    def get_asientos_disponibles(self, id_alumno: int) -> AsientosDisponibles:
        """Count how many more seats a student may reserve.

        Every row held by the student counts against the quota, whatever
        its state.

        Args:
            id_alumno: Student control number

        Returns:
            AsientosDisponibles, never negative. Zero for unknown students.
        """
        ocupados = len(self.db.get_reservas_by_referencia(id_alumno))

        alumno = self._get_alumno(id_alumno)
        if alumno is None:
            log_reserva_operation(
                logger,
                "get_asientos_disponibles",
                id_alumno=id_alumno,
                count=0,
                alumno_encontrado=False,
            )
            return AsientosDisponibles(asientos=0)

        nivel = alumno.alumno_nivel
        if alumno.alumno_grado in GRADOS_SECUNDARIA:
            nivel = 4

        boletos = BOLETOS_POR_NIVEL.get(nivel, 0)
        if id_alumno in ALUMNOS_DE_PRUEBA:
            boletos = BOLETOS_ALUMNO_DE_PRUEBA

        disponibles = max(0, boletos - ocupados)
        log_reserva_operation(
            logger,
            "get_asientos_disponibles",
            id_alumno=id_alumno,
            count=disponibles,
            boletos=boletos,
            ocupados=ocupados,
        )
        return AsientosDisponibles(asientos=disponibles)

    def get_pagos(
        self, id_alumno: int, solo_usuario: bool = False
    ) -> list[AsientoOcupado]:
        """List paid seats on the student's seat map.

        Args:
            id_alumno: Student control number
            solo_usuario: Only seats paid by this student

        Returns:
            Seats ordered by row and number
        """
        return self._get_asientos(
            "get_pagos", id_alumno, EstadoReserva.PAGADO, solo_usuario
        )

    def get_reservas(
        self, id_alumno: int, solo_usuario: bool = False
    ) -> list[AsientoOcupado]:
        """List reserved (unpaid) seats on the student's seat map.

        Args:
            id_alumno: Student control number
            solo_usuario: Only seats reserved by this student

        Returns:
            Seats ordered by row and number
        """
        return self._get_asientos(
            "get_reservas", id_alumno, EstadoReserva.RESERVADO, solo_usuario
        )

    def get_resumen_reservas(self, alumno_ref: int) -> ResumenReservas | None:
        """Build the receipt view of a student's active reservations.

        Args:
            alumno_ref: Student control number

        Returns:
            ResumenReservas, or None when the student does not exist
        """
        alumno = self._get_alumno(alumno_ref)
        if alumno is None:
            return None

        filas = [
            Reserva.model_validate(item)
            for item in self.db.get_reservas_by_referencia(alumno_ref)
        ]
        filas = [f for f in filas if f.estado == EstadoReserva.RESERVADO.value]
        filas.sort(key=lambda f: f.fecha_reserva or "", reverse=True)

        reservas = []
        for fila in filas:
            seccion, precio = resolve_seccion(fila.zoi, fila.precio)
            reservas.append(
                ReservaResumen(
                    id=fila.reserva_id,
                    seccion=seccion,
                    fila=fila.fila,
                    asiento=fila.asiento,
                    precio=precio,
                    fecha_reserva=format_fecha_reserva(fila.fecha_reserva),
                    fecha_pago=fila.fecha_pago or None,
                    pagado=fila.estado in ESTADOS_PAGADOS,
                    estado=fila.estado,
                )
            )

        fechas_pago = [f.fecha_pago for f in filas if f.fecha_pago and f.fecha_pago.strip()]
        if len(set(fechas_pago)) > 1:
            logger.warning(
                "Multiple payment dates for alumno %s: %s; using %s",
                alumno_ref,
                sorted(set(fechas_pago)),
                fechas_pago[0],
            )

        resumen = ResumenReservas(
            alumno=AlumnoResumen(
                nombre=alumno.nombre_completo,
                control=str(alumno_ref),
                funcion=resolve_funcion(alumno.alumno_nivel, alumno.alumno_grado).value,
            ),
            reservas=reservas,
            total=sum(r.precio for r in reservas),
            fecha_reserva=(
                reservas[0].fecha_reserva if reservas else format_fecha(hoy_en_festival())
            ),
            fecha_pago=fechas_pago[0] if fechas_pago else None,
        )
        log_reserva_operation(
            logger, "get_resumen_reservas", id_alumno=alumno_ref, count=len(reservas)
        )
        return resumen

    def _get_alumno(self, alumno_ref: int) -> Alumno | None:
        item = self.db.get_alumno(alumno_ref)
        return Alumno.model_validate(item) if item else None

    def _get_nivel_alumno(self, alumno_ref: int) -> int:
        """Resolve which seat map (level) a student books on.

        Maternal (1) shares the kinder map, grades 5 and 6 share the
        secundaria map. Unknown students default to level 1; test control
        numbers are pinned only once their record exists.
        """
        alumno = self._get_alumno(alumno_ref)
        if alumno is None:
            return NIVEL_POR_DEFECTO

        if alumno_ref in ALUMNOS_DE_PRUEBA:
            return ALUMNOS_DE_PRUEBA[alumno_ref]
        if alumno.alumno_grado in GRADOS_SECUNDARIA:
            return 4
        if alumno.alumno_nivel == 1:
            return 2
        return alumno.alumno_nivel

    def _get_asientos(
        self,
        operation: str,
        id_alumno: int,
        estado: EstadoReserva,
        solo_usuario: bool,
    ) -> list[AsientoOcupado]:
        nivel = self._get_nivel_alumno(id_alumno)
        items = self.db.get_reservas_by_nivel(
            nivel,
            estado.value,
            referencia=id_alumno if solo_usuario else None,
        )

        # Seat maps only need the position; other attributes are not read
        asientos = sorted(
            (
                AsientoOcupado(fila=str(item["fila"]), asiento=int(item["asiento"]))
                for item in items
            ),
            key=lambda a: (a.fila, a.asiento),
        )
        log_reserva_operation(
            logger,
            operation,
            id_alumno=id_alumno,
            solo_usuario=solo_usuario,
            count=len(asientos),
            nivel=nivel,
        )
        return asientos
