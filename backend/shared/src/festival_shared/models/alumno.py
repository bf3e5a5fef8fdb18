"""Student (alumno) model as stored in the alumnos table."""

from pydantic import BaseModel, Field


class Alumno(BaseModel):
    """A student whose family reserves festival seats.

    Numeric attributes arrive from DynamoDB as Decimal, so this model
    validates in lax mode.
    """

    alumno_ref: int = Field(..., description="Student control number")
    alumno_app: str = Field(default="", description="Paternal surname")
    alumno_apm: str = Field(default="", description="Maternal surname")
    alumno_nombre: str = Field(default="", description="Given name(s)")
    alumno_nivel: int = Field(
        ..., description="School level (1 maternal, 2 kinder, 3 primaria, 4 secundaria)"
    )
    alumno_grado: int = Field(..., description="Grade within the level")
    alumno_status: int = Field(default=1, description="Enrollment status flag")

    @property
    def nombre_completo(self) -> str:
        return f"{self.alumno_app} {self.alumno_apm} {self.alumno_nombre}"
