"""Enumeration types for festival reservation data models."""

from enum import Enum


class EstadoReserva(str, Enum):
    """State of a seat row in the reservas table."""

    DISPONIBLE = "disponible"
    RESERVADO = "reservado"
    PAGADO = "pagado"


class Funcion(str, Enum):
    """Festival show a student's family is assigned to."""

    PRIMERA = "1ra Función"
    SEGUNDA = "2da Función"
    TERCERA = "3ra Función"
    DESCONOCIDA = "Nivel desconocido"


class Zona(str, Enum):
    """Zone-of-interest codes printed on the seat map."""

    ORO_FRENTE = "OF"
    ORO_PALCOS = "OP"
    PLATA_FRENTE = "PF"
    PLATA_PALCOS = "PP"
    BRONCE_FRENTE = "BF"
    BRONCE_BALCON = "BB"
