# taxi_backend/services/drivers/service.py
"""
Use-case водителей.
Точка расширения для правил вроде пересчёта рейтинга.
"""

from __future__ import annotations

from taxi_backend.services.drivers.ports import DriverRepositoryPort, DriverUseCase
from taxi_backend.shared.models.driver_dto import DriverDTO, CreateDriverRequest, UpdateDriverRequest


class DriverService(DriverUseCase):
    def __init__(self, repository: DriverRepositoryPort):
        self.repository = repository

    async def list_drivers(self) -> list[DriverDTO]:
        return await self.repository.get_all()

    async def get_driver(self, driver_id: int) -> DriverDTO:
        return await self.repository.get_by_id(driver_id)

    async def create_driver(self, data: CreateDriverRequest) -> DriverDTO:
        return await self.repository.create(data)

    async def update_driver(self, driver_id: int, data: UpdateDriverRequest) -> DriverDTO:
        return await self.repository.update(driver_id, data)

    async def delete_driver(self, driver_id: int) -> None:
        await self.repository.delete(driver_id)
