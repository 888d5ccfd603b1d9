# travelease/schemas/booking.py
from typing import Any
from pydantic import BaseModel, ConfigDict

class BookingCreate(BaseModel):
    """Booking payload: anything the client sends besides userEmail is stored as given"""
    userEmail: Any = None

    model_config = ConfigDict(extra="allow")

    def to_document(self) -> dict:
        document = self.model_dump(exclude_unset=True)
        document.pop("_id", None)
        return document
