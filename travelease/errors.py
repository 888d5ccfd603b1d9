# travelease/errors.py
import logging
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def create_error_response(
    message: str,
    details: Optional[str] = None,
    example: Optional[str] = None
) -> Dict[str, Any]:
    """Create a detailed error response"""
    response = {
        "message": message,
        "details": details if details else message
    }
    if example:
        response["example"] = example
    return response


async def store_failure_handler(request: Request, exc: Exception) -> JSONResponse:
    """Turn a driver error raised inside a handler into a 500 carrying the driver's message"""
    logger.exception("Store operation failed on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "detail": create_error_response(
                message="Store operation failed",
                details=str(exc),
                example="Please try again or contact support if the problem persists"
            )
        },
    )
