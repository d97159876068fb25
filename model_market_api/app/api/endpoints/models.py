"""
Model listing endpoints.

CRUD routes for the ``models`` collection plus the purchase counter.
Every handler wraps its work in one ``try`` block: not‑found answers
404, any other failure is logged and answered with the generic 500
envelope.  Update, delete and increment do not check that the model
exists; an unknown identifier yields an acknowledgment with zero
matched documents.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from model_market_api.app.api.responses import failure, server_error, success
from model_market_api.app.core.db import MongoStore, get_store
from model_market_api.app.schemas.model import ModelCreate, ModelUpdate
from model_market_api.app.services.model_service import ModelService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_model_service(store: MongoStore = Depends(get_store)) -> ModelService:
    return ModelService(store)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_model(
    model_in: ModelCreate,
    service: ModelService = Depends(get_model_service),
) -> JSONResponse:
    """Create a model listing.

    ``createdAt`` and ``purchased`` are set by the server; owner,
    description and image receive defaults when absent.  Returns the
    insertion acknowledgment with the generated ``insertedId``.
    """
    try:
        ack = await service.create_model(model_in.model_dump(exclude_unset=True))
        return success(ack, status_code=status.HTTP_201_CREATED)
    except Exception as exc:
        return server_error(logger, exc, "Create model")


@router.get("")
async def list_models(
    email: Optional[str] = Query(None, description="Only return models whose createdBy equals this email"),
    service: ModelService = Depends(get_model_service),
) -> JSONResponse:
    """List all models, optionally filtered by creator email."""
    try:
        return success(await service.list_models(created_by=email))
    except Exception as exc:
        return server_error(logger, exc, "List models")


@router.get("/latest")
async def list_latest_models(service: ModelService = Depends(get_model_service)) -> JSONResponse:
    """Return the six most recently created models, newest first."""
    try:
        return success(await service.list_latest_models())
    except Exception as exc:
        return server_error(logger, exc, "List latest models")


@router.get("/{model_id}")
async def get_model(model_id: str, service: ModelService = Depends(get_model_service)) -> JSONResponse:
    try:
        model = await service.get_model(model_id)
        if model is None:
            return failure("Model not found", status.HTTP_404_NOT_FOUND)
        return success(model)
    except Exception as exc:
        return server_error(logger, exc, f"Get model {model_id}")


@router.put("/{model_id}")
async def update_model(
    model_id: str,
    model_in: ModelUpdate,
    service: ModelService = Depends(get_model_service),
) -> JSONResponse:
    """Partially update a model; only keys present in the body change."""
    try:
        ack = await service.update_model(model_id, model_in.model_dump(exclude_unset=True))
        return success(ack)
    except Exception as exc:
        return server_error(logger, exc, f"Update model {model_id}")


@router.delete("/{model_id}")
async def delete_model(model_id: str, service: ModelService = Depends(get_model_service)) -> JSONResponse:
    try:
        return success(await service.delete_model(model_id))
    except Exception as exc:
        return server_error(logger, exc, f"Delete model {model_id}")


@router.post("/{model_id}/purchase")
async def increment_purchase_count(
    model_id: str,
    service: ModelService = Depends(get_model_service),
) -> JSONResponse:
    """Add one to the model's ``purchased`` counter."""
    try:
        return success(await service.increment_purchased(model_id))
    except Exception as exc:
        return server_error(logger, exc, f"Increment purchases of model {model_id}")
