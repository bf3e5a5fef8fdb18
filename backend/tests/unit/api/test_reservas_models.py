"""Unit tests for reservation request models.

Tests the explicit validation step that replaces ad-hoc body parsing:
presence detection, integer coercion and the soloUsuario default.
"""

import pytest
from pydantic import ValidationError

from festival_api.models.reservas import (
    ConsultaAlumno,
    ConsultaAsientos,
    is_missing_id,
    parse_id_alumno,
)


class TestIsMissingId:
    """Tests for is_missing_id()."""

    @pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
    def test_falsy_values_are_missing(self, value: object) -> None:
        assert is_missing_id(value) is True

    @pytest.mark.parametrize("value", [1, "0", "42", " ", True, -3, [], "abc"])
    def test_other_values_are_present(self, value: object) -> None:
        assert is_missing_id(value) is False


class TestParseIdAlumno:
    """Tests for parse_id_alumno()."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (42, 42),
            ("42", 42),
            (" 42 ", 42),
            ("+7", 7),
            ("-3", -3),
            (12.0, 12),
        ],
    )
    def test_accepts_integer_like_values(self, value: object, expected: int) -> None:
        assert parse_id_alumno(value) == expected

    @pytest.mark.parametrize("value", [True, False, 4.5, "4.5", "abc", "12abc", "", None, [1]])
    def test_rejects_everything_else(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_id_alumno(value)


class TestConsultaAlumno:
    """Tests for the ConsultaAlumno request body."""

    def test_parses_wire_names(self) -> None:
        consulta = ConsultaAlumno.model_validate({"idAlumno": "1001", "soloUsuario": True})

        assert consulta.id_alumno == 1001
        assert consulta.solo_usuario is True

    def test_solo_usuario_defaults_false(self) -> None:
        consulta = ConsultaAlumno.model_validate({"idAlumno": 1001})

        assert consulta.solo_usuario is False

    def test_solo_usuario_null_is_false(self) -> None:
        consulta = ConsultaAlumno.model_validate({"idAlumno": 1001, "soloUsuario": None})

        assert consulta.solo_usuario is False

    def test_extra_fields_are_ignored(self) -> None:
        consulta = ConsultaAlumno.model_validate({"idAlumno": 1, "otro": "x"})

        assert consulta.id_alumno == 1

    def test_non_numeric_id_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ConsultaAlumno.model_validate({"idAlumno": "abc"})

    def test_populate_by_field_name(self) -> None:
        consulta = ConsultaAlumno(id_alumno=5, solo_usuario=True)

        assert consulta.model_dump(by_alias=True) == {"idAlumno": 5, "soloUsuario": True}


class TestConsultaAsientos:
    """Tests for the remaining-seats request body."""

    def test_reads_only_id_alumno(self) -> None:
        consulta = ConsultaAsientos.model_validate({"idAlumno": "7", "soloUsuario": "maybe"})

        assert consulta.id_alumno == 7
        assert not hasattr(consulta, "solo_usuario")

    def test_non_numeric_id_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            ConsultaAsientos.model_validate({"idAlumno": "abc"})
