# --- File: firmness/schemas/category.py ---
from __future__ import annotations

from pydantic import Field

from .base import BaseSchema

__all__ = ["CategoryCreate", "CategoryUpdate", "CategoryRead"]


class CategoryCreate(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100)


class CategoryUpdate(CategoryCreate):
    id: int


class CategoryRead(BaseSchema):
    id: int
    name: str
