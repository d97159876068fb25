"""Liveness endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

LIVENESS_MESSAGE = "Backend is running..."


@router.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    """Return a plain text message confirming the process is serving.

    The store is not contacted.
    """
    return LIVENESS_MESSAGE
