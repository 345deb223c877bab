from datetime import datetime
from pydantic import BaseModel
from taxi_backend.common.constants import MIN_DRIVER_RATING
from taxi_backend.shared.models.common import EntityRequest

class DriverDTO(BaseModel):
    id: int
    name: str
    phone: str
    license_number: str
    rating: float = 0.0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class CreateDriverRequest(EntityRequest):
    name: str
    phone: str
    license_number: str
    rating: float = 0.0

    def is_valid(self) -> bool:
        """Рейтинг водителя не может быть отрицательным."""
        return self.rating >= MIN_DRIVER_RATING

class UpdateDriverRequest(EntityRequest):
    # Полная замена: рейтинг обязателен
    name: str
    phone: str
    license_number: str
    rating: float
