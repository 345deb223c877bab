from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response, status
from taxi_backend.common.constants import MIN_ENTITY_ID, MAX_ENTITY_ID
from taxi_backend.services.clients.dependencies import get_client_service
from taxi_backend.services.clients.ports import ClientUseCase
from taxi_backend.shared.models.client_dto import ClientDTO, CreateClientRequest, UpdateClientRequest

router = APIRouter(prefix="/clients", tags=["clients"])

ClientId = Annotated[int, Path(ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="ID клиента")]

@router.get("", response_model=list[ClientDTO])
async def get_clients(service: ClientUseCase = Depends(get_client_service)):
    return await service.list_clients()

@router.get("/{client_id}", response_model=ClientDTO)
async def get_client_by_id(
    client_id: ClientId,
    service: ClientUseCase = Depends(get_client_service)
):
    return await service.get_client(client_id)

@router.post("", response_model=ClientDTO, status_code=status.HTTP_201_CREATED)
async def create_client(
    data: CreateClientRequest,
    service: ClientUseCase = Depends(get_client_service)
):
    return await service.create_client(data)

@router.put("/{client_id}", response_model=ClientDTO)
async def update_client(
    data: UpdateClientRequest,
    client_id: ClientId,
    service: ClientUseCase = Depends(get_client_service)
):
    return await service.update_client(client_id, data)

@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_client(
    client_id: ClientId,
    service: ClientUseCase = Depends(get_client_service)
):
    await service.delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")
