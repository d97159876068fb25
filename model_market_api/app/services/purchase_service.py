"""
Business logic for purchases.

Purchases are append‑only: they are inserted with a server timestamp
and never updated or deleted here.  A purchase's ``modelId`` is a plain
string that is not checked against the ``models`` collection, so the
purchase history is an inner join: purchases whose model no longer
exists, or whose ``modelId`` is not a valid ObjectId, are left out.

The join runs in two queries, the user's purchases (newest first) and
then every referenced model in a single ``$in`` lookup on ``_id``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bson import ObjectId
from pymongo import DESCENDING

from ..core.db import MongoStore
from ..core.object_id import InvalidObjectId, parse_object_id
from ..core.serialization import insert_ack, to_jsonable

logger = logging.getLogger(__name__)

# Model fields attached to each purchase as ``modelDetails``.
MODEL_DETAIL_FIELDS = (
    "name",
    "framework",
    "useCase",
    "dataset",
    "description",
    "image",
    "createdBy",
    "purchased",
)

MODEL_DETAIL_PROJECTION: Dict[str, int] = {field: 1 for field in MODEL_DETAIL_FIELDS}


def build_new_purchase(fields: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    document = dict(fields)
    document.pop("_id", None)
    document["purchasedAt"] = now or datetime.now(timezone.utc)
    return document


def referenced_model_id(purchase: Mapping[str, Any]) -> Optional[ObjectId]:
    """Return the purchase's ``modelId`` as an ObjectId, or ``None``."""
    try:
        return parse_object_id(purchase.get("modelId"))
    except InvalidObjectId:
        return None


def join_model_details(
    purchases: Iterable[Mapping[str, Any]],
    models: Iterable[Mapping[str, Any]],
) -> List[Dict[str, Any]]:
    """Attach each purchase's model as ``modelDetails``.

    Purchase order is kept.  A purchase without a matching model is
    dropped.
    """
    models_by_id = {model["_id"]: model for model in models}
    rows = []
    for purchase in purchases:
        model = models_by_id.get(referenced_model_id(purchase))
        if model is None:
            continue
        rows.append({**purchase, "modelDetails": dict(model)})
    return rows


class PurchaseService:
    """Store operations on the ``purchases`` collection."""

    def __init__(self, store: MongoStore) -> None:
        self.store = store

    async def create_purchase(self, fields: Mapping[str, Any]) -> Dict[str, Any]:
        collection = await self.store.purchases()
        document = build_new_purchase(fields)
        result = await collection.insert_one(document)
        logger.info(
            "Recorded purchase %s of model %s by %s",
            result.inserted_id,
            document.get("modelId"),
            document.get("userEmail"),
        )
        return insert_ack(result)

    async def list_purchases_for_user(self, user_email: str) -> List[Dict[str, Any]]:
        """Return the user's purchases, newest first, with ``modelDetails``."""
        purchases_collection = await self.store.purchases()
        cursor = purchases_collection.find({"userEmail": user_email}).sort("purchasedAt", DESCENDING)
        purchases = await cursor.to_list(length=None)

        model_ids = {oid for oid in map(referenced_model_id, purchases) if oid is not None}
        if not model_ids:
            return []
        models_collection = await self.store.models()
        models = await models_collection.find(
            {"_id": {"$in": list(model_ids)}}, MODEL_DETAIL_PROJECTION
        ).to_list(length=None)

        rows = join_model_details(purchases, models)
        if len(rows) < len(purchases):
            logger.debug("Dropped %d purchases of %s with no matching model", len(purchases) - len(rows), user_email)
        return to_jsonable(rows)
