"""FastAPI dependency injection providers for shared services.

Services are lazily instantiated and cached with @lru_cache so every
request reuses the same boto3 resources.

Usage in routes:
    from festival_api.dependencies import get_reserva_model

    @router.post("/reservas/pagos")
    async def listar_pagos(
        model: ReservaModel = Depends(get_reserva_model),
    ):
        ...

Service Dependency Graph:
    DynamoDBService (singleton via get_dynamodb_service)
        └── ReservaModel

Testing:
    Override get_reserva_model / get_route_logger through
    app.dependency_overrides, and call reset_services() between tests.
"""

import logging
from functools import lru_cache

from festival_shared.services.dynamodb import get_dynamodb_service
from festival_shared.services.reserva_model import ReservaModel
from festival_shared.utils.logging import get_logger


@lru_cache
def get_reserva_model() -> ReservaModel:
    """Get cached ReservaModel instance.

    Returns:
        ReservaModel configured with the DynamoDB singleton.
    """
    return ReservaModel(db=get_dynamodb_service())


def get_route_logger() -> logging.Logger:
    """Logger the reservation routes report failures through."""
    return get_logger("festival_api.routes.reservas")


def reset_services() -> None:
    """Clear all cached service instances.

    Also resets the underlying DynamoDB singleton.
    """
    from festival_shared.services.dynamodb import reset_dynamodb_service

    get_reserva_model.cache_clear()
    reset_dynamodb_service()
