from typing import List
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from travelease.auth import Identity, ensure_owner, get_current_user
from travelease.database import BOOKINGS, get_database
from travelease.models import BookingModel
from travelease.schemas import BookingCreate, InsertAcknowledgment
from travelease.utils.timestamps import utc_timestamp

router = APIRouter()


@router.post("/bookings", response_model=InsertAcknowledgment)
async def create_booking(
    booking: BookingCreate,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    ensure_owner(user, booking.userEmail)

    booking_dict = booking.to_document()
    booking_dict["createdAt"] = utc_timestamp()

    result = await db[BOOKINGS].insert_one(booking_dict)
    return InsertAcknowledgment.from_result(result)


@router.get("/my-bookings/{email}", response_model=List[BookingModel])
async def get_my_bookings(
    email: str,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    ensure_owner(user, email)
    return await db[BOOKINGS].find({"userEmail": email}).to_list(length=None)
