from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ItemAttributesS(BaseModel):
    """Full set of attributes needed to build a cart line"""
    id: int | str
    name: str | None = None
    quantity: int | float = 1
    price: float
    options: dict[str, Any] = Field(default_factory=dict)
    tax_rate: float | None = None


class CartItemPatchS(BaseModel):
    """Partial update of a cart line, only the fields that were set are applied"""
    id: int | str | None = None
    name: str | None = None
    quantity: int | float | None = None
    price: float | None = None
    options: dict[str, Any] | None = None
    tax_rate: float | None = None


class StoredCartS(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    identifier: str
    instance: str
    content: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
