# travelease/schemas/vehicle.py
from typing import Any
from pydantic import BaseModel, ConfigDict

# Fields a PUT may replace; identity, userEmail and createdAt are never among them
UPDATABLE_FIELDS = (
    "vehicleName",
    "owner",
    "category",
    "pricePerDay",
    "location",
    "availability",
    "description",
    "coverImage",
)

class VehicleBase(BaseModel):
    vehicleName: Any = None
    owner: Any = None
    category: Any = None
    pricePerDay: Any = None
    location: Any = None
    availability: Any = None
    description: Any = None
    coverImage: Any = None

class VehicleCreate(VehicleBase):
    # Left optional so a missing email is refused as an ownership mismatch
    userEmail: Any = None

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict:
        document = self.model_dump(exclude_unset=True)
        document.pop("_id", None)
        return document

class VehicleUpdate(VehicleBase):
    def to_update(self) -> dict:
        return {"$set": self.model_dump(include=set(UPDATABLE_FIELDS))}
