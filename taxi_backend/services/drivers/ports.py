# taxi_backend/services/drivers/ports.py
"""Интерфейсы репозитория и use-case водителей."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taxi_backend.shared.models.driver_dto import DriverDTO, CreateDriverRequest, UpdateDriverRequest


class DriverRepositoryPort(ABC):
    """Интерфейс хранилища водителей."""

    @abstractmethod
    async def get_all(self) -> list[DriverDTO]:
        ...

    @abstractmethod
    async def get_by_id(self, driver_id: int) -> DriverDTO:
        ...

    @abstractmethod
    async def create(self, data: CreateDriverRequest) -> DriverDTO:
        ...

    @abstractmethod
    async def update(self, driver_id: int, data: UpdateDriverRequest) -> DriverDTO:
        ...

    @abstractmethod
    async def delete(self, driver_id: int) -> None:
        ...


class DriverUseCase(ABC):
    """Интерфейс use-case водителей, от которого зависят HTTP-маршруты."""

    @abstractmethod
    async def list_drivers(self) -> list[DriverDTO]:
        ...

    @abstractmethod
    async def get_driver(self, driver_id: int) -> DriverDTO:
        ...

    @abstractmethod
    async def create_driver(self, data: CreateDriverRequest) -> DriverDTO:
        ...

    @abstractmethod
    async def update_driver(self, driver_id: int, data: UpdateDriverRequest) -> DriverDTO:
        ...

    @abstractmethod
    async def delete_driver(self, driver_id: int) -> None:
        ...
