"""API-specific request/response models.

This package contains Pydantic models specific to the REST API layer.
Domain models (Alumno, Reserva, ResumenReservas, ...) are in
festival_shared.models and are reused here where appropriate.

Modules:
- common: Shared error body re-export
- health: Liveness response model
- reservas: Request bodies and response wrappers for reservation endpoints
"""

__all__: list[str] = []
