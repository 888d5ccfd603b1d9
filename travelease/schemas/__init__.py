# travelease/schemas/__init__.py
from .vehicle import VehicleCreate, VehicleUpdate, UPDATABLE_FIELDS
from .booking import BookingCreate
from .acknowledgment import InsertAcknowledgment, UpdateAcknowledgment, DeleteAcknowledgment
