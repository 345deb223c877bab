# taxi_backend/services/clients/ports.py
"""Интерфейсы репозитория и use-case клиентов."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taxi_backend.shared.models.client_dto import ClientDTO, CreateClientRequest, UpdateClientRequest


class ClientRepositoryPort(ABC):
    """Интерфейс хранилища клиентов."""

    @abstractmethod
    async def get_all(self) -> list[ClientDTO]:
        ...

    @abstractmethod
    async def get_by_id(self, client_id: int) -> ClientDTO:
        ...

    @abstractmethod
    async def create(self, data: CreateClientRequest) -> ClientDTO:
        ...

    @abstractmethod
    async def update(self, client_id: int, data: UpdateClientRequest) -> ClientDTO:
        ...

    @abstractmethod
    async def delete(self, client_id: int) -> None:
        ...


class ClientUseCase(ABC):
    """Интерфейс use-case клиентов, от которого зависят HTTP-маршруты."""

    @abstractmethod
    async def list_clients(self) -> list[ClientDTO]:
        ...

    @abstractmethod
    async def get_client(self, client_id: int) -> ClientDTO:
        ...

    @abstractmethod
    async def create_client(self, data: CreateClientRequest) -> ClientDTO:
        ...

    @abstractmethod
    async def update_client(self, client_id: int, data: UpdateClientRequest) -> ClientDTO:
        ...

    @abstractmethod
    async def delete_client(self, client_id: int) -> None:
        ...
