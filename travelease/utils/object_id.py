# travelease/utils/object_id.py
from typing import Annotated

from bson import ObjectId, errors
from fastapi import HTTPException
from pydantic import BeforeValidator

from travelease.errors import create_error_response

# Store identifiers leave the API as their 24 character hex form
PyObjectId = Annotated[str, BeforeValidator(str)]


def parse_object_id(value: str, label: str = "vehicle") -> ObjectId:
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        raise HTTPException(
            status_code=400,
            detail=create_error_response(
                message=f"Invalid {label} ID format",
                details=f"The provided ID '{value}' is not valid",
                example="Expected format: '507f1f77bcf86cd799439011' (24 characters, hexadecimal)"
            )
        )
