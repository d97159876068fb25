"""
Pydantic schemas for model listings.

A model listing is an arbitrary document.  The fields declared here are
the ones the marketplace front‑end sends, but none of them is type
checked: values of any JSON type are stored as given, and anything else
in the request body is kept too.  Server‑managed fields (``createdAt``,
``purchased``) are not part of the input schemas and are overwritten if
supplied.
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelBase(BaseModel):
    name: Any = Field(None, examples=["ResNet-50 Image Classifier"])
    framework: Any = Field(None, examples=["PyTorch"])
    useCase: Any = Field(None, examples=["Image classification"])
    dataset: Any = Field(None, examples=["ImageNet"])
    description: Any = Field(None, examples=["Pretrained on 1.2M images"])
    image: Any = Field(None, examples=["https://example.com/resnet.png"])
    createdBy: Any = Field(None, examples=["owner@example.com"])
    ownerEmail: Any = Field(None, examples=["owner@example.com"])

    model_config = {
        "extra": "allow",
    }


class ModelCreate(ModelBase):
    """Schema for creating a model listing."""
    pass


class ModelUpdate(ModelBase):
    """Schema for updating a model listing.

    Only the keys present in the request body are written; absent keys
    keep their stored values.
    """
    pass
