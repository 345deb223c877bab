from fastapi import Request
from taxi_backend.api.dependencies import get_database
from taxi_backend.services.cars.ports import CarUseCase
from taxi_backend.services.cars.repository import CarRepository
from taxi_backend.services.cars.service import CarService

def get_car_repository(request: Request) -> CarRepository:
    return CarRepository(get_database(request))

def get_car_service(request: Request) -> CarUseCase:
    repository = get_car_repository(request)
    return CarService(repository)
