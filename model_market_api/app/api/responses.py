"""
Response envelopes.

Successful responses carry ``{"success": true, "data": ...}``; failures
carry ``{"success": false, "message": ...}``.  ``server_error`` is the
single response used for every unexpected failure so that no store or
parsing detail reaches the client.
"""

import logging
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..core.object_id import InvalidObjectId

SERVER_ERROR_MESSAGE = "Server Error"


def success(data: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


def failure(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def server_error(logger: logging.Logger, exc: Exception, action: str) -> JSONResponse:
    """Log ``exc`` and return the generic 500 envelope.

    Malformed identifiers are logged as a warning without traceback;
    anything else (connection loss, query failures) is logged with its
    traceback.  Clients see the same response in both cases.
    """
    if isinstance(exc, InvalidObjectId):
        logger.warning("%s: %s", action, exc)
    else:
        logger.exception("%s failed", action)
    return failure(SERVER_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
