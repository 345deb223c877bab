# taxi_backend/services/clients/repository.py
"""
Репозиторий клиентов: единственное место, где выполняется SQL по таблице clients.
"""

from __future__ import annotations

from taxi_backend.common.exceptions import NotFoundError
from taxi_backend.infra.database import DatabaseManager
from taxi_backend.services.clients.ports import ClientRepositoryPort
from taxi_backend.shared.models.client_dto import ClientDTO, CreateClientRequest, UpdateClientRequest

CLIENT_COLUMNS = "id, name, phone, email, created_at, updated_at"


class ClientRepository(ClientRepositoryPort):
    def __init__(self, db: DatabaseManager):
        self.db = db

    async def get_all(self) -> list[ClientDTO]:
        """Возвращает всех клиентов (порядок определяет БД)."""
        records = await self.db.fetch(f"SELECT {CLIENT_COLUMNS} FROM clients")
        return [ClientDTO(**dict(record)) for record in records]

    async def get_by_id(self, client_id: int) -> ClientDTO:
        """Получает клиента по ID или поднимает NotFoundError."""
        query = f"""
            SELECT {CLIENT_COLUMNS}
            FROM clients
            WHERE id = $1
        """
        record = await self.db.fetchrow(query, client_id)
        if record is None:
            raise NotFoundError("client", client_id)
        return ClientDTO(**dict(record))

    async def create(self, data: CreateClientRequest) -> ClientDTO:
        """Создаёт клиента; временные метки ставит сервер БД."""
        query = f"""
            INSERT INTO clients (name, phone, email, created_at, updated_at)
            VALUES ($1, $2, $3, NOW(), NOW())
            RETURNING {CLIENT_COLUMNS}
        """
        record = await self.db.fetchrow(query, data.name, data.phone, data.email)
        return ClientDTO(**dict(record))

    async def update(self, client_id: int, data: UpdateClientRequest) -> ClientDTO:
        """Полностью заменяет изменяемые поля клиента."""
        query = f"""
            UPDATE clients
            SET name = $2, phone = $3, email = $4, updated_at = NOW()
            WHERE id = $1
            RETURNING {CLIENT_COLUMNS}
        """
        record = await self.db.fetchrow(query, client_id, data.name, data.phone, data.email)
        if record is None:
            raise NotFoundError("client", client_id)
        return ClientDTO(**dict(record))

    async def delete(self, client_id: int) -> None:
        """Удаляет клиента. Отсутствующий ID ошибкой не считается."""
        await self.db.execute("DELETE FROM clients WHERE id = $1", client_id)
