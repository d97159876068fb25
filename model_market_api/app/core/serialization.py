"""
Conversion of MongoDB values into JSON‑ready structures.

Documents read from the store carry BSON types (``ObjectId``,
``datetime``) and write operations return driver result objects.  The
helpers here turn both into plain dicts and lists; the acknowledgment
shapes use the camelCase keys clients of the service already expect.
"""

from datetime import datetime
from typing import Any, Dict

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def to_jsonable(value: Any) -> Any:
    """Recursively convert BSON values to JSON‑compatible Python values."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def insert_ack(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": to_jsonable(result.inserted_id),
    }


def update_ack(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": to_jsonable(upserted_id),
    }


def delete_ack(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
