"""
Purchase endpoints.

``POST /purchases`` records a purchase; ``GET /purchases?email=``
returns a user's purchase history joined with the purchased models.
The history requires an email and answers 400 without one.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from model_market_api.app.api.responses import failure, server_error, success
from model_market_api.app.core.db import MongoStore, get_store
from model_market_api.app.schemas.purchase import PurchaseCreate
from model_market_api.app.services.purchase_service import PurchaseService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_purchase_service(store: MongoStore = Depends(get_store)) -> PurchaseService:
    return PurchaseService(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_purchase(
    purchase_in: PurchaseCreate,
    service: PurchaseService = Depends(get_purchase_service),
) -> JSONResponse:
    """Record a purchase; ``purchasedAt`` is set by the server."""
    try:
        ack = await service.create_purchase(purchase_in.model_dump(exclude_unset=True))
        return success(ack, status_code=status.HTTP_201_CREATED)
    except Exception as exc:
        return server_error(logger, exc, "Create purchase")


@router.get("")
async def list_purchases(
    email: Optional[str] = Query(None, description="Email of the purchasing user"),
    user_email: Optional[str] = Query(None, alias="userEmail"),
    service: PurchaseService = Depends(get_purchase_service),
) -> JSONResponse:
    """Return the user's purchases, newest first.

    Each row carries the purchased model's public fields under
    ``modelDetails``.  Purchases whose model cannot be found are left
    out.  ``userEmail`` is accepted in place of ``email``.
    """
    user = email or user_email
    if not user:
        return failure("Email is required", status.HTTP_400_BAD_REQUEST)
    try:
        return success(await service.list_purchases_for_user(user))
    except Exception as exc:
        return server_error(logger, exc, f"List purchases of {user}")
