# firmness/services/common/mapping.py
"""
Explicit conversions between ORM entities and API schemas.

Each function copies fields one by one so the defaulting rules stay visible:
``created_at`` and ``is_active`` are set on creation only, and the identifier
is never written from a payload.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, List

from firmness.models import Category, Product
from firmness.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from firmness.schemas.product import ProductCreate, ProductRead, ProductUpdate


def product_to_read(product: Product) -> ProductRead:
    return ProductRead(
        id=product.id,
        name=product.name,
        category_id=product.category_id,
        category=product.category.name if product.category is not None else "",
        description=product.description or "",
        code=product.code,
        price=product.price,
        stock=product.stock,
        is_active=product.is_active,
        created_at=product.created_at,
    )


def products_to_read(products: Iterable[Product]) -> List[ProductRead]:
    return [product_to_read(p) for p in products]


def product_from_create(payload: ProductCreate, category: Category) -> Product:
    """New, unsaved product with creation defaults applied."""
    return Product(
        name=payload.name,
        category=category,
        description=payload.description,
        code=payload.code,
        price=payload.price,
        stock=payload.stock,
        is_active=True,
        created_at=datetime.now(timezone.utc),
    )


def apply_product_update(
    product: Product,
    payload: ProductUpdate,
    category: Category,
) -> Product:
    """Copy editable fields onto ``product``; id and created_at are left alone."""
    product.name = payload.name
    product.description = payload.description
    product.code = payload.code
    product.price = payload.price
    product.stock = payload.stock
    product.is_active = payload.is_active
    product.category = category
    return product


def category_to_read(category: Category) -> CategoryRead:
    return CategoryRead(id=category.id, name=category.name)


def categories_to_read(categories: Iterable[Category]) -> List[CategoryRead]:
    return [category_to_read(c) for c in categories]


def category_from_create(payload: CategoryCreate) -> Category:
    return Category(name=payload.name)


def apply_category_update(category: Category, payload: CategoryUpdate) -> Category:
    category.name = payload.name
    return category
