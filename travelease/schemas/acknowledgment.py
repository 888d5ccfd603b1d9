# travelease/schemas/acknowledgment.py
from typing import Optional
from pydantic import BaseModel
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

class InsertAcknowledgment(BaseModel):
    acknowledged: bool
    insertedId: str

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAcknowledgment":
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))

class UpdateAcknowledgment(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAcknowledgment":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if upserted_id is None else 1,
            upsertedId=None if upserted_id is None else str(upserted_id),
        )

class DeleteAcknowledgment(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAcknowledgment":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
