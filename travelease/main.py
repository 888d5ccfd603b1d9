# travelease/main.py
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from bson.errors import BSONError
from pymongo.errors import PyMongoError
from travelease.routes import vehicle_router, booking_router
from travelease.database import connect_to_mongo, close_mongo_connection, init_db
from travelease.auth import create_identity_verifier
from travelease.config import Settings, get_settings
from travelease.errors import store_failure_handler
from travelease.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    # Startup
    app.state.identity_verifier = create_identity_verifier(settings)
    try:
        app.state.database = await connect_to_mongo(settings)
        try:
            await init_db(app.state.database)
            yield
        finally:
            await close_mongo_connection(app.state.database)
    finally:
        app.state.identity_verifier.close()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(title="TravelEase", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # encoding errors are raised client side, outside the PyMongoError hierarchy
    for error in (PyMongoError, BSONError, OverflowError):
        app.add_exception_handler(error, store_failure_handler)

    app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["vehicles"])
    app.include_router(booking_router, prefix=settings.API_PREFIX, tags=["bookings"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "TravelEase Server is Running!"

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "travelease.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
