# travelease/models/booking.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from travelease.utils.object_id import PyObjectId

class BookingModel(BaseModel):
    id: PyObjectId = Field(alias="_id")
    userEmail: Optional[str] = None
    createdAt: Optional[str] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)
