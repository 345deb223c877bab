from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response, status
from taxi_backend.common.constants import MIN_ENTITY_ID, MAX_ENTITY_ID
from taxi_backend.common.exceptions import ValidationError
from taxi_backend.services.drivers.dependencies import get_driver_service
from taxi_backend.services.drivers.ports import DriverUseCase
from taxi_backend.shared.models.driver_dto import DriverDTO, CreateDriverRequest, UpdateDriverRequest

router = APIRouter(prefix="/drivers", tags=["drivers"])

DriverId = Annotated[int, Path(ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="ID водителя")]

@router.get("", response_model=list[DriverDTO])
async def get_drivers(service: DriverUseCase = Depends(get_driver_service)):
    return await service.list_drivers()

@router.get("/{driver_id}", response_model=DriverDTO)
async def get_driver_by_id(
    driver_id: DriverId,
    service: DriverUseCase = Depends(get_driver_service)
):
    return await service.get_driver(driver_id)

@router.post("", response_model=DriverDTO, status_code=status.HTTP_201_CREATED)
async def create_driver(
    data: CreateDriverRequest,
    service: DriverUseCase = Depends(get_driver_service)
):
    # Проверяем до обращения к БД, чтобы не было частичной записи
    if not data.is_valid():
        raise ValidationError(f"driver rating {data.rating} is negative")
    return await service.create_driver(data)

@router.put("/{driver_id}", response_model=DriverDTO)
async def update_driver(
    data: UpdateDriverRequest,
    driver_id: DriverId,
    service: DriverUseCase = Depends(get_driver_service)
):
    return await service.update_driver(driver_id, data)

@router.delete("/{driver_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_driver(
    driver_id: DriverId,
    service: DriverUseCase = Depends(get_driver_service)
):
    # Водителя с автомобилями удалить нельзя: БД вернёт ошибку внешнего ключа
    await service.delete_driver(driver_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")
