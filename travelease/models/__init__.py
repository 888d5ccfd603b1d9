# travelease/models/__init__.py
from .vehicle import VehicleModel
from .booking import BookingModel
