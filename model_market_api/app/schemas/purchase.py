"""Pydantic schemas for purchase records."""

from typing import Any

from pydantic import BaseModel, Field


class PurchaseCreate(BaseModel):
    """Schema for recording a purchase.

    ``modelId`` is expected to be the hex identifier of the purchased
    model.  It is not checked against the ``models`` collection, and
    neither field is type checked.
    """

    modelId: Any = Field(None, examples=["6650f1c2a4b5c6d7e8f90123"])
    userEmail: Any = Field(None, examples=["buyer@example.com"])

    model_config = {"extra": "allow"}
