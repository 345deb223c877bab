# taxi_backend/shared/models/__init__.py
"""
DTO и Pydantic-модели сущностей таксопарка.
"""

from taxi_backend.shared.models.common import ErrorResponse, EntityRequest
from taxi_backend.shared.models.client_dto import (
    ClientDTO,
    CreateClientRequest,
    UpdateClientRequest,
)
from taxi_backend.shared.models.driver_dto import (
    DriverDTO,
    CreateDriverRequest,
    UpdateDriverRequest,
)
from taxi_backend.shared.models.car_dto import (
    CarDTO,
    CreateCarRequest,
    UpdateCarRequest,
)

__all__ = [
    "ErrorResponse",
    "EntityRequest",
    "ClientDTO",
    "CreateClientRequest",
    "UpdateClientRequest",
    "DriverDTO",
    "CreateDriverRequest",
    "UpdateDriverRequest",
    "CarDTO",
    "CreateCarRequest",
    "UpdateCarRequest",
]
