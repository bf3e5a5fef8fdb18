"""API routes package.

This package contains FastAPI routers for all REST API endpoints:

- health: Liveness check
- reservas: Seat availability, payments, reservations and summary

All routers are registered in main.py with /api prefix.
"""

from festival_api.routes.health import router as health_router
from festival_api.routes.reservas import router as reservas_router

__all__ = [
    "health_router",
    "reservas_router",
]
