# taxi_backend/services/clients/service.py
"""
Use-case клиентов.
Сейчас только делегирует вызовы репозиторию; бизнес-правила
(например, проверка дубликатов телефона) добавляются здесь.
"""

from __future__ import annotations

from taxi_backend.services.clients.ports import ClientRepositoryPort, ClientUseCase
from taxi_backend.shared.models.client_dto import ClientDTO, CreateClientRequest, UpdateClientRequest


class ClientService(ClientUseCase):
    def __init__(self, repository: ClientRepositoryPort):
        self.repository = repository

    async def list_clients(self) -> list[ClientDTO]:
        return await self.repository.get_all()

    async def get_client(self, client_id: int) -> ClientDTO:
        return await self.repository.get_by_id(client_id)

    async def create_client(self, data: CreateClientRequest) -> ClientDTO:
        return await self.repository.create(data)

    async def update_client(self, client_id: int, data: UpdateClientRequest) -> ClientDTO:
        return await self.repository.update(client_id, data)

    async def delete_client(self, client_id: int) -> None:
        await self.repository.delete(client_id)
