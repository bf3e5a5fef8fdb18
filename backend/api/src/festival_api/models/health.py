"""API models for the health endpoint."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Static liveness payload."""

    status: str = Field(default="OK", examples=["OK"])
    message: str = Field(
        default="Festival Navideño API funcionando correctamente",
        description="Human-readable status",
    )
    timestamp: str = Field(
        ...,
        description="Current UTC time (ISO 8601)",
        examples=["2025-12-01T18:30:00.000000+00:00"],
    )
