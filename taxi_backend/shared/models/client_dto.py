from datetime import datetime
from pydantic import BaseModel
from taxi_backend.shared.models.common import EntityRequest

class ClientDTO(BaseModel):
    id: int
    name: str
    phone: str
    email: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class CreateClientRequest(EntityRequest):
    name: str
    phone: str
    email: str

class UpdateClientRequest(EntityRequest):
    name: str
    phone: str
    email: str
