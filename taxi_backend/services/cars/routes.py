from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response, status
from taxi_backend.common.constants import MIN_ENTITY_ID, MAX_ENTITY_ID
from taxi_backend.common.exceptions import ValidationError
from taxi_backend.services.cars.dependencies import get_car_service
from taxi_backend.services.cars.ports import CarUseCase
from taxi_backend.shared.models.car_dto import CarDTO, CreateCarRequest, UpdateCarRequest

router = APIRouter(prefix="/cars", tags=["cars"])

CarId = Annotated[int, Path(ge=MIN_ENTITY_ID, le=MAX_ENTITY_ID, description="ID автомобиля")]

@router.get("", response_model=list[CarDTO])
async def get_cars(service: CarUseCase = Depends(get_car_service)):
    return await service.list_cars()

@router.get("/{car_id}", response_model=CarDTO)
async def get_car_by_id(
    car_id: CarId,
    service: CarUseCase = Depends(get_car_service)
):
    return await service.get_car(car_id)

@router.post("", response_model=CarDTO, status_code=status.HTTP_201_CREATED)
async def create_car(
    data: CreateCarRequest,
    service: CarUseCase = Depends(get_car_service)
):
    """
    Создаёт автомобиль.
    driver_id должен ссылаться на существующего водителя, иначе БД
    отклонит вставку и клиент получит 500.
    """
    if not data.is_valid():
        raise ValidationError(f"car year {data.year} is before 1950")
    return await service.create_car(data)

@router.put("/{car_id}", response_model=CarDTO)
async def update_car(
    data: UpdateCarRequest,
    car_id: CarId,
    service: CarUseCase = Depends(get_car_service)
):
    return await service.update_car(car_id, data)

@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_car(
    car_id: CarId,
    service: CarUseCase = Depends(get_car_service)
):
    await service.delete_car(car_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT, media_type="application/json")
