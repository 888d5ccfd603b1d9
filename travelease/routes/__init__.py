#travelease/routes/__init__.py

from .vehicle import router as vehicle_router
from .booking import router as booking_router
