from fastapi import Request
from taxi_backend.api.dependencies import get_database
from taxi_backend.services.drivers.ports import DriverUseCase
from taxi_backend.services.drivers.repository import DriverRepository
from taxi_backend.services.drivers.service import DriverService

def get_driver_repository(request: Request) -> DriverRepository:
    return DriverRepository(get_database(request))

def get_driver_service(request: Request) -> DriverUseCase:
    repository = get_driver_repository(request)
    return DriverService(repository)
