"""Festival data-access services."""

from .dynamodb import DynamoDBService, get_dynamodb_service, reset_dynamodb_service
from .reserva_model import ReservaModel

__all__ = [
    "DynamoDBService",
    "ReservaModel",
    "get_dynamodb_service",
    "reset_dynamodb_service",
]
