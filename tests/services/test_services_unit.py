# tests/services/test_services_unit.py
"""
Unit тесты для use-case слоя: сервисы только делегируют репозиторию
и пробрасывают его ошибки без изменений.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from taxi_backend.common.exceptions import NotFoundError, StoreError
from taxi_backend.services.cars.service import CarService
from taxi_backend.services.clients.service import ClientService
from taxi_backend.services.drivers.service import DriverService
from taxi_backend.shared.models import (
    CarDTO,
    ClientDTO,
    CreateCarRequest,
    CreateClientRequest,
    DriverDTO,
    UpdateDriverRequest,
)


@pytest.fixture
def mock_repo() -> AsyncMock:
    return AsyncMock()


class TestClientService:
    """Тесты для ClientService."""

    @pytest.mark.asyncio
    async def test_list_clients(self, mock_repo: AsyncMock, client_row: dict[str, Any]) -> None:
        mock_repo.get_all.return_value = [ClientDTO(**client_row)]

        result = await ClientService(mock_repo).list_clients()

        assert result[0].id == 1
        mock_repo.get_all.assert_awaited_once_with()

    @pytest.mark.asyncio
    async def test_get_client_not_found(self, mock_repo: AsyncMock) -> None:
        mock_repo.get_by_id.side_effect = NotFoundError("client", 5)

        with pytest.raises(NotFoundError):
            await ClientService(mock_repo).get_client(5)

    @pytest.mark.asyncio
    async def test_create_client(self, mock_repo: AsyncMock, client_row: dict[str, Any]) -> None:
        data = CreateClientRequest(name="John Doe", phone="+1234567890", email="john@example.com")
        mock_repo.create.return_value = ClientDTO(**client_row)

        result = await ClientService(mock_repo).create_client(data)

        assert result.email == "john@example.com"
        mock_repo.create.assert_awaited_once_with(data)

    @pytest.mark.asyncio
    async def test_delete_client(self, mock_repo: AsyncMock) -> None:
        await ClientService(mock_repo).delete_client(1)

        mock_repo.delete.assert_awaited_once_with(1)


class TestDriverService:
    """Тесты для DriverService."""

    @pytest.mark.asyncio
    async def test_update_driver(self, mock_repo: AsyncMock, driver_row: dict[str, Any]) -> None:
        data = UpdateDriverRequest(name="A", phone="123", license_number="L1", rating=4.5)
        mock_repo.update.return_value = DriverDTO(**driver_row)

        result = await DriverService(mock_repo).update_driver(7, data)

        assert result.rating == 4.5
        mock_repo.update.assert_awaited_once_with(7, data)

    @pytest.mark.asyncio
    async def test_store_error_propagates(self, mock_repo: AsyncMock) -> None:
        mock_repo.delete.side_effect = StoreError("violates foreign key constraint")

        with pytest.raises(StoreError):
            await DriverService(mock_repo).delete_driver(7)


class TestCarService:
    """Тесты для CarService."""

    @pytest.mark.asyncio
    async def test_get_car(self, mock_repo: AsyncMock, car_row: dict[str, Any]) -> None:
        mock_repo.get_by_id.return_value = CarDTO(**car_row)

        result = await CarService(mock_repo).get_car(3)

        assert result.model == "Camry"
        mock_repo.get_by_id.assert_awaited_once_with(3)

    @pytest.mark.asyncio
    async def test_create_car(self, mock_repo: AsyncMock, car_row: dict[str, Any]) -> None:
        data = CreateCarRequest(
            driver_id=7, brand="Toyota", model="Camry", year=2018, license_plate="AA1234BC", color="black"
        )
        mock_repo.create.return_value = CarDTO(**car_row)

        await CarService(mock_repo).create_car(data)

        mock_repo.create.assert_awaited_once_with(data)
