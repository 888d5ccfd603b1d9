# travelease/database.py
import logging

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from travelease.config import Settings

logger = logging.getLogger(__name__)

VEHICLES = "vehicles"
BOOKINGS = "bookings"


class Database:
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None


async def connect_to_mongo(settings: Settings) -> Database:
    database = Database()
    database.client = AsyncIOMotorClient(
        settings.MONGODB_URI,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )
    database.db = database.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)
    return database


async def close_mongo_connection(database: Database):
    if database.client:
        database.client.close()
        logger.info("Closed MongoDB connection")


async def init_db(database: Database) -> bool:
    try:
        collections = await database.db.list_collection_names()
        for name in (VEHICLES, BOOKINGS):
            if name not in collections:
                await database.db.create_collection(name)

        # Owner lookups
        await database.db[VEHICLES].create_index([("userEmail", ASCENDING)])
        await database.db[BOOKINGS].create_index([("userEmail", ASCENDING)])

        # Latest listing
        await database.db[VEHICLES].create_index([("createdAt", DESCENDING)])

        logger.info("Database initialized successfully")
        return True
    except PyMongoError:
        logger.exception("Database initialization failed")
        return False


async def get_database(request: Request) -> AsyncIOMotorDatabase:
    return request.app.state.database.db
