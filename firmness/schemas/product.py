# --- File: firmness/schemas/product.py ---
"""
Product request/response schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from .base import BaseSchema

__all__ = ["ProductCreate", "ProductUpdate", "ProductRead"]


class ProductCreate(BaseSchema):
    """Payload to create a product. ``created_at`` and ``is_active`` are never accepted."""

    name: str = Field(..., min_length=3, max_length=100)
    category_id: int = Field(..., gt=0)
    description: str = Field(default="", max_length=500)
    code: str = Field(..., min_length=1, max_length=20)
    price: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)
    stock: int = Field(..., ge=0)


class ProductUpdate(ProductCreate):
    """Payload to update an existing product."""

    id: int
    is_active: bool = True


class ProductRead(BaseSchema):
    id: int
    name: str
    category_id: int
    category: str = ""
    description: str = ""
    code: str
    price: Decimal
    stock: int
    is_active: bool
    created_at: datetime
