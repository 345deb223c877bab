from fastapi import Request
from taxi_backend.api.dependencies import get_database
from taxi_backend.services.clients.ports import ClientUseCase
from taxi_backend.services.clients.repository import ClientRepository
from taxi_backend.services.clients.service import ClientService

def get_client_repository(request: Request) -> ClientRepository:
    return ClientRepository(get_database(request))

def get_client_service(request: Request) -> ClientUseCase:
    repository = get_client_repository(request)
    return ClientService(repository)
