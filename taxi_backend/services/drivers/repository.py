# taxi_backend/services/drivers/repository.py
"""
Репозиторий водителей.
"""

from __future__ import annotations

from taxi_backend.common.exceptions import NotFoundError
from taxi_backend.infra.database import DatabaseManager
from taxi_backend.services.drivers.ports import DriverRepositoryPort
from taxi_backend.shared.models.driver_dto import DriverDTO, CreateDriverRequest, UpdateDriverRequest

DRIVER_COLUMNS = "id, name, phone, license_number, rating, created_at, updated_at"


class DriverRepository(DriverRepositoryPort):
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def get_all(self) -> list[DriverDTO]:
        records = await self.db.fetch(f"SELECT {DRIVER_COLUMNS} FROM drivers")
        return [DriverDTO(**dict(record)) for record in records]

    async def get_by_id(self, driver_id: int) -> DriverDTO:
        query = f"""
            SELECT {DRIVER_COLUMNS}
            FROM drivers
            WHERE id = $1
        """
        record = await self.db.fetchrow(query, driver_id)
        if record is None:
            raise NotFoundError("driver", driver_id)
        return DriverDTO(**dict(record))

    async def create(self, data: CreateDriverRequest) -> DriverDTO:
        query = f"""
            INSERT INTO drivers (name, phone, license_number, rating, created_at, updated_at)
            VALUES ($1, $2, $3, $4, NOW(), NOW())
            RETURNING {DRIVER_COLUMNS}
        """
        record = await self.db.fetchrow(
            query,
            data.name,
            data.phone,
            data.license_number,
            data.rating,
        )
        return DriverDTO(**dict(record))

    async def update(self, driver_id: int, data: UpdateDriverRequest) -> DriverDTO:
        query = f"""
            UPDATE drivers
            SET name = $2, phone = $3, license_number = $4, rating = $5, updated_at = NOW()
            WHERE id = $1
            RETURNING {DRIVER_COLUMNS}
        """
        record = await self.db.fetchrow(
            query,
            driver_id,
            data.name,
            data.phone,
            data.license_number,
            data.rating,
        )
        if record is None:
            raise NotFoundError("driver", driver_id)
        return DriverDTO(**dict(record))

    async def delete(self, driver_id: int) -> None:
        """
        Удаляет водителя.
        Если у водителя есть автомобили, внешний ключ cars.driver_id
        не даст удалить запись: БД вернёт ошибку (StoreError).
        """
        await self.db.execute("DELETE FROM drivers WHERE id = $1", driver_id)
