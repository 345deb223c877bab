# taxi_backend/services/cars/service.py
"""
Use-case автомобилей.
Точка расширения для правил вроде проверки уникальности госномера.
"""

from __future__ import annotations

from taxi_backend.services.cars.ports import CarRepositoryPort, CarUseCase
from taxi_backend.shared.models.car_dto import CarDTO, CreateCarRequest, UpdateCarRequest


class CarService(CarUseCase):
    def __init__(self, repository: CarRepositoryPort):
        self.repository = repository

    async def list_cars(self) -> list[CarDTO]:
        return await self.repository.get_all()

    async def get_car(self, car_id: int) -> CarDTO:
        return await self.repository.get_by_id(car_id)

    async def create_car(self, data: CreateCarRequest) -> CarDTO:
        return await self.repository.create(data)

    async def update_car(self, car_id: int, data: UpdateCarRequest) -> CarDTO:
        return await self.repository.update(car_id, data)

    async def delete_car(self, car_id: int) -> None:
        await self.repository.delete(car_id)
