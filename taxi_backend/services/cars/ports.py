# taxi_backend/services/cars/ports.py
"""Интерфейсы репозитория и use-case автомобилей."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taxi_backend.shared.models.car_dto import CarDTO, CreateCarRequest, UpdateCarRequest


class CarRepositoryPort(ABC):
    """Интерфейс хранилища автомобилей."""

    @abstractmethod
    async def get_all(self) -> list[CarDTO]:
        ...

    @abstractmethod
    async def get_by_id(self, car_id: int) -> CarDTO:
        ...

    @abstractmethod
    async def create(self, data: CreateCarRequest) -> CarDTO:
        ...

    @abstractmethod
    async def update(self, car_id: int, data: UpdateCarRequest) -> CarDTO:
        ...

    @abstractmethod
    async def delete(self, car_id: int) -> None:
        ...


class CarUseCase(ABC):
    """Интерфейс use-case автомобилей, от которого зависят HTTP-маршруты."""

    @abstractmethod
    async def list_cars(self) -> list[CarDTO]:
        ...

    @abstractmethod
    async def get_car(self, car_id: int) -> CarDTO:
        ...

    @abstractmethod
    async def create_car(self, data: CreateCarRequest) -> CarDTO:
        ...

    @abstractmethod
    async def update_car(self, car_id: int, data: UpdateCarRequest) -> CarDTO:
        ...

    @abstractmethod
    async def delete_car(self, car_id: int) -> None:
        ...
