# taxi_backend/services/cars/repository.py
"""
Репозиторий автомобилей.
Ссылка на водителя проверяется внешним ключом cars.driver_id.
"""

from __future__ import annotations

from taxi_backend.common.exceptions import NotFoundError
from taxi_backend.infra.database import DatabaseManager
from taxi_backend.services.cars.ports import CarRepositoryPort
from taxi_backend.shared.models.car_dto import CarDTO, CreateCarRequest, UpdateCarRequest

CAR_COLUMNS = "id, driver_id, brand, model, year, license_plate, color, created_at, updated_at"


class CarRepository(CarRepositoryPort):
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def get_all(self) -> list[CarDTO]:
        records = await self.db.fetch(f"SELECT {CAR_COLUMNS} FROM cars")
        return [CarDTO(**dict(record)) for record in records]

    async def get_by_id(self, car_id: int) -> CarDTO:
        query = f"""
            SELECT {CAR_COLUMNS}
            FROM cars
            WHERE id = $1
        """
        record = await self.db.fetchrow(query, car_id)
        if record is None:
            raise NotFoundError("car", car_id)
        return CarDTO(**dict(record))

    async def create(self, data: CreateCarRequest) -> CarDTO:
        """Создаёт автомобиль. Несуществующий driver_id приводит к StoreError."""
        query = f"""
            INSERT INTO cars (
                driver_id, brand, model, year, license_plate, color, created_at, updated_at
            )
            VALUES ($1, $2, $3, $4, $5, $6, NOW(), NOW())
            RETURNING {CAR_COLUMNS}
        """
        record = await self.db.fetchrow(
            query,
            data.driver_id,
            data.brand,
            data.model,
            data.year,
            data.license_plate,
            data.color,
        )
        return CarDTO(**dict(record))

    async def update(self, car_id: int, data: UpdateCarRequest) -> CarDTO:
        """Полностью заменяет изменяемые поля автомобиля, включая driver_id."""
        query = f"""
            UPDATE cars
            SET driver_id = $2,
                brand = $3,
                model = $4,
                year = $5,
                license_plate = $6,
                color = $7,
                updated_at = NOW()
            WHERE id = $1
            RETURNING {CAR_COLUMNS}
        """
        record = await self.db.fetchrow(
            query,
            car_id,
            data.driver_id,
            data.brand,
            data.model,
            data.year,
            data.license_plate,
            data.color,
        )
        if record is None:
            raise NotFoundError("car", car_id)
        return CarDTO(**dict(record))

    async def delete(self, car_id: int) -> None:
        await self.db.execute("DELETE FROM cars WHERE id = $1", car_id)
