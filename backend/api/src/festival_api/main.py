"""FastAPI application for the Festival Navideño reservation API.

This package provides REST endpoints for:
- Health checks
- Seat availability, paid seats, reserved seats and reservation summary
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from festival_api.exceptions import register_exception_handlers
from festival_api.middleware.correlation import CorrelationIdMiddleware
from festival_api.routes.health import router as health_router
from festival_api.routes.reservas import router as reservas_router
from festival_shared.utils.logging import configure_logging

configure_logging()

app = FastAPI(
    title="Festival Navideño API",
    description="REST API for festival seat reservations",
    version="0.1.0",
)

# Configure CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)


# Include routers under /api prefix
app.include_router(health_router, prefix="/api")
app.include_router(reservas_router, prefix="/api")


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run(
            "festival_api.main:app",
            host=host,
            port=port,
            reload=True,
            reload_dirs=["backend/api/src", "backend/shared/src"],
        )
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
