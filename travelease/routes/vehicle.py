from typing import List, Optional
from fastapi import APIRouter, HTTPException, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from travelease.auth import Identity, ensure_owner, get_current_user
from travelease.database import VEHICLES, get_database
from travelease.errors import create_error_response
from travelease.models import VehicleModel
from travelease.schemas import (
    DeleteAcknowledgment,
    InsertAcknowledgment,
    UpdateAcknowledgment,
    VehicleCreate,
    VehicleUpdate,
)
from travelease.utils.object_id import parse_object_id
from travelease.utils.timestamps import utc_timestamp

router = APIRouter()

LATEST_LIMIT = 6


async def get_owned_vehicle(db: AsyncIOMotorDatabase, vehicle_id: str, user: Identity) -> dict:
    """Fetch a vehicle for mutation, refusing with 404 when absent and 403 when not owned"""
    vehicle_oid = parse_object_id(vehicle_id)
    existing_vehicle = await db[VEHICLES].find_one({"_id": vehicle_oid})
    if not existing_vehicle:
        raise HTTPException(
            status_code=404,
            detail=create_error_response(
                message="Vehicle not found",
                details=f"No vehicle found with ID: {vehicle_id}",
                example="Please ensure you're using a valid vehicle ID"
            )
        )
    ensure_owner(user, existing_vehicle.get("userEmail"))
    return existing_vehicle


@router.get("/vehicles", response_model=List[VehicleModel])
async def get_vehicles(db: AsyncIOMotorDatabase = Depends(get_database)):
    return await db[VEHICLES].find().to_list(length=None)


@router.get("/vehicles/latest", response_model=List[VehicleModel])
async def get_latest_vehicles(db: AsyncIOMotorDatabase = Depends(get_database)):
    cursor = db[VEHICLES].find().sort("createdAt", -1).limit(LATEST_LIMIT)
    return await cursor.to_list(length=LATEST_LIMIT)


@router.get("/vehicles/{vehicle_id}", response_model=Optional[VehicleModel])
async def get_vehicle(vehicle_id: str, db: AsyncIOMotorDatabase = Depends(get_database)):
    return await db[VEHICLES].find_one({"_id": parse_object_id(vehicle_id)})


@router.get("/my-vehicles/{email}", response_model=List[VehicleModel])
async def get_my_vehicles(
    email: str,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    ensure_owner(user, email)
    return await db[VEHICLES].find({"userEmail": email}).to_list(length=None)


@router.post("/vehicles", response_model=InsertAcknowledgment)
async def create_vehicle(
    vehicle: VehicleCreate,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    ensure_owner(user, vehicle.userEmail)

    vehicle_dict = vehicle.to_document()
    vehicle_dict["createdAt"] = utc_timestamp()

    result = await db[VEHICLES].insert_one(vehicle_dict)
    return InsertAcknowledgment.from_result(result)


@router.put("/vehicles/{vehicle_id}", response_model=UpdateAcknowledgment)
async def update_vehicle(
    vehicle_id: str,
    vehicle: Optional[VehicleUpdate] = None,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing_vehicle = await get_owned_vehicle(db, vehicle_id, user)

    result = await db[VEHICLES].update_one(
        {"_id": existing_vehicle["_id"]},
        (vehicle or VehicleUpdate()).to_update(),
        upsert=False
    )
    return UpdateAcknowledgment.from_result(result)


@router.delete("/vehicles/{vehicle_id}", response_model=DeleteAcknowledgment)
async def delete_vehicle(
    vehicle_id: str,
    user: Identity = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_database)
):
    existing_vehicle = await get_owned_vehicle(db, vehicle_id, user)

    result = await db[VEHICLES].delete_one({"_id": existing_vehicle["_id"]})
    return DeleteAcknowledgment.from_result(result)
