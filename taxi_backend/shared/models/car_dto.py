from datetime import datetime
from pydantic import BaseModel
from taxi_backend.common.constants import MIN_CAR_YEAR
from taxi_backend.shared.models.common import EntityRequest

class CarDTO(BaseModel):
    id: int
    driver_id: int
    brand: str
    model: str
    year: int
    license_plate: str
    color: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class CreateCarRequest(EntityRequest):
    driver_id: int
    brand: str
    model: str
    year: int
    license_plate: str
    color: str

    def is_valid(self) -> bool:
        """Год выпуска не раньше 1950."""
        return self.year >= MIN_CAR_YEAR

class UpdateCarRequest(EntityRequest):
    driver_id: int
    brand: str
    model: str
    year: int
    license_plate: str
    color: str
