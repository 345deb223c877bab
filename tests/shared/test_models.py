# tests/shared/test_models.py
"""
Тесты для DTO и проекций запросов.
"""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from taxi_backend.shared.models import (
    CarDTO,
    ClientDTO,
    CreateCarRequest,
    CreateClientRequest,
    CreateDriverRequest,
    DriverDTO,
    ErrorResponse,
    UpdateCarRequest,
    UpdateClientRequest,
    UpdateDriverRequest,
)


def _car_payload(**overrides: Any) -> dict[str, Any]:
    payload = {
        "driver_id": 7,
        "brand": "Toyota",
        "model": "Camry",
        "year": 2018,
        "license_plate": "AA1234BC",
        "color": "black",
    }
    payload.update(overrides)
    return payload


class TestClientModels:
    """Тесты для моделей клиента."""

    def test_dto_from_row(self, client_row: dict[str, Any]) -> None:
        dto = ClientDTO(**client_row)

        assert dto.id == 1
        assert dto.email == "john@example.com"

    def test_requests_always_valid(self) -> None:
        data = {"name": "John", "phone": "+1", "email": "j@x.io"}

        assert CreateClientRequest(**data).is_valid()
        assert UpdateClientRequest(**data).is_valid()

    def test_server_fields_are_ignored(self) -> None:
        """id и метки времени из тела запроса не попадают в проекцию."""
        request = CreateClientRequest(
            id=99, name="John", phone="+1", email="j@x.io", created_at="2020-01-01T00:00:00Z"
        )

        assert "id" not in request.model_dump()
        assert "created_at" not in request.model_dump()

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            CreateClientRequest(name="John", phone="+1")


class TestDriverModels:
    """Тесты для моделей водителя."""

    def test_rating_defaults_to_zero_on_create(self) -> None:
        request = CreateDriverRequest(name="A", phone="123", license_number="L1")

        assert request.rating == 0.0
        assert request.is_valid()

    @pytest.mark.parametrize("rating", [0.0, 2.5, 5.0, 5.5, 100.0])
    def test_rating_not_negative(self, rating: float) -> None:
        assert CreateDriverRequest(name="A", phone="1", license_number="L", rating=rating).is_valid()

    @pytest.mark.parametrize("rating", [-0.1, -1.0])
    def test_rating_negative(self, rating: float) -> None:
        assert not CreateDriverRequest(name="A", phone="1", license_number="L", rating=rating).is_valid()

    def test_update_requires_rating(self) -> None:
        with pytest.raises(ValidationError):
            UpdateDriverRequest(name="A", phone="1", license_number="L")

    def test_update_has_no_rating_rule(self) -> None:
        """Правило рейтинга проверяется только при создании."""
        assert UpdateDriverRequest(name="A", phone="1", license_number="L", rating=-1.0).is_valid()

    def test_rating_as_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateDriverRequest(name="A", phone="1", license_number="L", rating="4.5")

    def test_integer_rating_accepted(self) -> None:
        assert CreateDriverRequest(name="A", phone="1", license_number="L", rating=4).rating == 4.0

    def test_dto_from_row(self, driver_row: dict[str, Any]) -> None:
        assert DriverDTO(**driver_row).rating == 4.5


class TestCarModels:
    """Тесты для моделей автомобиля."""

    @pytest.mark.parametrize("year", [1950, 2000, 2030])
    def test_year_accepted(self, year: int) -> None:
        assert CreateCarRequest(**_car_payload(year=year)).is_valid()

    @pytest.mark.parametrize("year", [1899, 1949])
    def test_year_rejected(self, year: int) -> None:
        assert not CreateCarRequest(**_car_payload(year=year)).is_valid()

    def test_update_has_no_year_rule(self) -> None:
        assert UpdateCarRequest(**_car_payload(year=1899)).is_valid()

    def test_year_as_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CreateCarRequest(**_car_payload(year="2020"))

    def test_driver_id_must_be_integer(self) -> None:
        with pytest.raises(ValidationError):
            CreateCarRequest(**_car_payload(driver_id="seven"))

    def test_dto_from_row(self, car_row: dict[str, Any]) -> None:
        dto = CarDTO(**car_row)

        assert dto.driver_id == 7
        assert dto.license_plate == "AA1234BC"


def test_error_response_shape() -> None:
    assert ErrorResponse(errors="bad request").model_dump() == {"errors": "bad request"}
