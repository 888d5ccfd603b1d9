# travelease/models/vehicle.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from travelease.utils.object_id import PyObjectId

class VehicleModel(BaseModel):
    """A document from the vehicles collection; client supplied fields pass through untouched"""
    id: PyObjectId = Field(alias="_id")
    userEmail: Optional[str] = None
    createdAt: Optional[str] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)
