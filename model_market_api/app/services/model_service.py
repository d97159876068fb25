"""
Business logic for model listings.

``build_new_model`` is the single place where a new listing receives
its server‑managed fields and defaults.  ``ModelService`` performs the
store operations against the ``models`` collection and converts driver
results into JSON‑ready structures.

None of the write operations check that the target document exists:
updating, deleting or incrementing an unknown identifier succeeds with
zero matched documents.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from pymongo import DESCENDING

from ..core.db import MongoStore
from ..core.object_id import parse_object_id
from ..core.serialization import delete_ack, insert_ack, to_jsonable, update_ack

logger = logging.getLogger(__name__)

UNKNOWN_OWNER = "unknown"
DEFAULT_DESCRIPTION = "No description provided."
DEFAULT_IMAGE = "https://via.placeholder.com/300x200?text=AI+Model"

MODEL_DEFAULTS: Dict[str, str] = {
    "createdBy": UNKNOWN_OWNER,
    "ownerEmail": UNKNOWN_OWNER,
    "description": DEFAULT_DESCRIPTION,
    "image": DEFAULT_IMAGE,
}

LATEST_LIMIT = 6

# Fields a partial update may not overwrite.
PROTECTED_FIELDS = frozenset({"_id", "createdAt", "purchased"})


def build_new_model(fields: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """Return a fully populated model document for insertion.

    Caller fields are copied as given.  ``createdAt`` and ``purchased``
    are always set by the server; each key of ``MODEL_DEFAULTS`` is
    filled when missing, ``None`` or an empty string.
    """
    document = dict(fields)
    document.pop("_id", None)
    for key, default in MODEL_DEFAULTS.items():
        if document.get(key) in (None, ""):
            document[key] = default
    document["createdAt"] = now or datetime.now(timezone.utc)
    document["purchased"] = 0
    return document


def build_update(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the ``$set`` payload for a partial update."""
    return {key: value for key, value in fields.items() if key not in PROTECTED_FIELDS}


class ModelService:
    """Store operations on the ``models`` collection."""

    def __init__(self, store: MongoStore) -> None:
        self.store = store

    async def create_model(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        collection = await self.store.models()
        document = build_new_model(fields)
        result = await collection.insert_one(document)
        logger.info("Created model %s", result.inserted_id)
        return insert_ack(result)

    async def list_models(self, created_by: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return every model, or only those whose ``createdBy`` matches."""
        collection = await self.store.models()
        query: Dict[str, Any] = {}
        if created_by:
            query["createdBy"] = created_by
        documents = await collection.find(query).to_list(length=None)
        return to_jsonable(documents)

    async def list_latest_models(self) -> List[Dict[str, Any]]:
        collection = await self.store.models()
        cursor = collection.find({}).sort("createdAt", DESCENDING).limit(LATEST_LIMIT)
        documents = await cursor.to_list(length=LATEST_LIMIT)
        return to_jsonable(documents)

    async def get_model(self, model_id: str) -> Optional[Dict[str, Any]]:
        """Return the model with ``model_id`` or ``None``.

        Raises ``InvalidObjectId`` when ``model_id`` is malformed.
        """
        object_id = parse_object_id(model_id)
        collection = await self.store.models()
        document = await collection.find_one({"_id": object_id})
        if document is None:
            return None
        return to_jsonable(document)

    async def update_model(self, model_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``fields`` into the stored model.

        An update left with no writable fields issues no write and
        reports how many documents the identifier matches.
        """
        object_id = parse_object_id(model_id)
        collection = await self.store.models()
        changes = build_update(fields)
        if not changes:
            matched = await collection.count_documents({"_id": object_id})
            return {
                "acknowledged": True,
                "matchedCount": matched,
                "modifiedCount": 0,
                "upsertedCount": 0,
                "upsertedId": None,
            }
        result = await collection.update_one({"_id": object_id}, {"$set": changes})
        logger.info("Updated model %s (matched=%s)", model_id, result.matched_count)
        return update_ack(result)

    async def delete_model(self, model_id: str) -> Dict[str, Any]:
        object_id = parse_object_id(model_id)
        collection = await self.store.models()
        result = await collection.delete_one({"_id": object_id})
        logger.info("Deleted model %s (deleted=%s)", model_id, result.deleted_count)
        return delete_ack(result)

    async def increment_purchased(self, model_id: str) -> Dict[str, Any]:
        """Atomically add one to the model's ``purchased`` counter."""
        object_id = parse_object_id(model_id)
        collection = await self.store.models()
        result = await collection.update_one({"_id": object_id}, {"$inc": {"purchased": 1}})
        logger.info("Incremented purchases of model %s (matched=%s)", model_id, result.matched_count)
        return update_ack(result)
