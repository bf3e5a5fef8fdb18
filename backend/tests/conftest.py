"""Pytest configuration and fixtures for festival reservation backend tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto
- Sample data fixtures (alumnos, reservas)
- A fake ReservaModel for route tests
"""

import os
from typing import Any, Generator
from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-festival")

# Only set fake credentials for moto if no real credentials are present
if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")


# === Singleton Reset ===


@pytest.fixture(autouse=True)
def reset_service_singletons() -> Generator[None, None, None]:
    """Reset cached services before and after each test.

    Tests using mock_aws get a fresh DynamoDB resource inside the mock
    context rather than reusing one from a previous test.
    """
    from festival_api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create the alumnos and reservas tables for testing."""
    tables = [
        {
            "TableName": "test-festival-alumnos",
            "KeySchema": [{"AttributeName": "alumno_ref", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "alumno_ref", "AttributeType": "N"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": "test-festival-reservas",
            "KeySchema": [{"AttributeName": "reserva_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "reserva_id", "AttributeType": "S"},
                {"AttributeName": "nivel", "AttributeType": "N"},
                {"AttributeName": "estado", "AttributeType": "S"},
                {"AttributeName": "referencia", "AttributeType": "N"},
            ],
            "GlobalSecondaryIndexes": [
                {
                    "IndexName": "nivel-estado-index",
                    "KeySchema": [
                        {"AttributeName": "nivel", "KeyType": "HASH"},
                        {"AttributeName": "estado", "KeyType": "RANGE"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
                {
                    "IndexName": "referencia-index",
                    "KeySchema": [{"AttributeName": "referencia", "KeyType": "HASH"}],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]

    for table_config in tables:
        dynamodb_client.create_table(**table_config)


@pytest.fixture
def dynamodb_service(create_tables: None) -> Any:
    """DynamoDBService bound to the mocked tables."""
    from festival_shared.services.dynamodb import DynamoDBService

    return DynamoDBService()


@pytest.fixture
def seed_festival(
    dynamodb_service: Any,
    sample_alumnos: list[dict[str, Any]],
    sample_reservas: list[dict[str, Any]],
) -> Any:
    """Mocked tables loaded with the sample alumnos and reservas."""
    for alumno in sample_alumnos:
        dynamodb_service.put_item("alumnos", alumno)
    for reserva in sample_reservas:
        dynamodb_service.put_item("reservas", reserva)
    return dynamodb_service


# === Sample Data Fixtures ===


@pytest.fixture
def sample_alumnos() -> list[dict[str, Any]]:
    """Students covering every quota/level rule."""
    return [
        # Primaria 3rd grade -> level 3, 4 seats, 2da Función
        {
            "alumno_ref": 1001,
            "alumno_app": "García",
            "alumno_apm": "López",
            "alumno_nombre": "Ana",
            "alumno_nivel": 3,
            "alumno_grado": 3,
            "alumno_status": 1,
        },
        # Maternal -> quota level 1 (8 seats), seat map level 2
        {
            "alumno_ref": 1002,
            "alumno_app": "Pérez",
            "alumno_apm": "Ruiz",
            "alumno_nombre": "Luis",
            "alumno_nivel": 1,
            "alumno_grado": 2,
            "alumno_status": 1,
        },
        # Primaria 6th grade -> seated with secundaria (level 4, 3 seats)
        {
            "alumno_ref": 1003,
            "alumno_app": "Martínez",
            "alumno_apm": "Soto",
            "alumno_nombre": "Carla",
            "alumno_nivel": 3,
            "alumno_grado": 6,
            "alumno_status": 1,
        },
        # Kinder, same seat map as 1002
        {
            "alumno_ref": 1004,
            "alumno_app": "Hernández",
            "alumno_apm": "Vega",
            "alumno_nombre": "Sofía",
            "alumno_nivel": 2,
            "alumno_grado": 1,
            "alumno_status": 1,
        },
        # Test student pinned to level 3
        {
            "alumno_ref": 33333,
            "alumno_app": "Prueba",
            "alumno_apm": "Primaria",
            "alumno_nombre": "Staff",
            "alumno_nivel": 1,
            "alumno_grado": 1,
            "alumno_status": 1,
        },
    ]


@pytest.fixture
def sample_reservas() -> list[dict[str, Any]]:
    """Seat rows across the level 2 and level 3 seat maps."""
    return [
        # Level 3 map: 1001 holds two reserved seats and one paid seat
        {
            "reserva_id": "r-3-A-1",
            "fila": "A",
            "asiento": 1,
            "estado": "reservado",
            "referencia": 1001,
            "nivel": 3,
            "precio": 0,
            "zoi": "OF",
            "zona": "ORO",
            "fecha_pago": "2025-12-09",
            "fecha_reserva": "2025-12-01T10:00:00",
        },
        {
            "reserva_id": "r-3-A-2",
            "fila": "A",
            "asiento": 2,
            "estado": "reservado",
            "referencia": 1001,
            "nivel": 3,
            "precio": 160,
            "zoi": "XX",
            "zona": "PLATA",
            "fecha_pago": "2025-12-09",
            "fecha_reserva": "2025-12-02T09:30:00",
        },
        {
            "reserva_id": "r-3-C-7",
            "fila": "C",
            "asiento": 7,
            "estado": "pagado",
            "referencia": 1001,
            "nivel": 3,
            "precio": 120,
            "zoi": "BB",
            "zona": "BRONCE",
            "fecha_pago": "2025-12-05",
            "fecha_reserva": "2025-11-28T12:00:00",
        },
        # Level 3 map: another family's seats
        {
            "reserva_id": "r-3-B-5",
            "fila": "B",
            "asiento": 5,
            "estado": "reservado",
            "referencia": 9999,
            "nivel": 3,
            "precio": 180,
            "zoi": "OP",
            "zona": "ORO",
            "fecha_pago": "2025-12-10",
            "fecha_reserva": "2025-12-03T08:00:00",
        },
        {
            "reserva_id": "r-3-B-3",
            "fila": "B",
            "asiento": 3,
            "estado": "pagado",
            "referencia": 9999,
            "nivel": 3,
            "precio": 180,
            "zoi": "OF",
            "zona": "ORO",
            "fecha_pago": "2025-12-04",
            "fecha_reserva": "2025-11-30T08:00:00",
        },
        # Level 2 map: 1004 paid one seat
        {
            "reserva_id": "r-2-D-9",
            "fila": "D",
            "asiento": 9,
            "estado": "pagado",
            "referencia": 1004,
            "nivel": 2,
            "precio": 160,
            "zoi": "PF",
            "zona": "PLATA",
            "fecha_pago": "2025-12-04",
            "fecha_reserva": "2025-11-29T11:00:00",
        },
    ]


# === Route Fixtures ===


@pytest.fixture
def fake_model() -> MagicMock:
    """Stand-in ReservaModel with canned results."""
    model = MagicMock()
    model.get_asientos_disponibles.return_value = {"asientos": 3}
    model.get_pagos.return_value = [{"fila": "A", "asiento": 1}]
    model.get_reservas.return_value = [{"fila": "B", "asiento": 2}]
    return model
