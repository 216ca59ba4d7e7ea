# firmness/api/routes/products.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from firmness.api.deps import get_product_service, require_roles
from firmness.api.responses import error_response, to_response
from firmness.core.constants import UserRole
from firmness.schemas.product import ProductCreate, ProductRead, ProductUpdate
from firmness.services.inventory.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])

readers = require_roles(UserRole.ADMIN, UserRole.CUSTOMER)
admins = require_roles(UserRole.ADMIN)


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List products",
    dependencies=[Depends(readers)],
)
def list_products(service: ProductService = Depends(get_product_service)) -> Response:
    return to_response(service.get_all())


@router.get(
    "/search",
    response_model=List[ProductRead],
    summary="Search products by name or code",
    dependencies=[Depends(readers)],
)
def search_products(
    term: str = Query("", description="At least two characters, matched ignoring case"),
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(service.search(term))


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get a single product",
    dependencies=[Depends(readers)],
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(service.get_by_id(product_id))


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
    dependencies=[Depends(admins)],
)
def create_product(
    payload: ProductCreate,
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(service.create(payload), status.HTTP_201_CREATED)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update a product",
    dependencies=[Depends(admins)],
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service),
) -> Response:
    if product_id != payload.id:
        return error_response("Route ID and body ID do not match.", status.HTTP_400_BAD_REQUEST)
    return to_response(service.update(payload))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
    dependencies=[Depends(admins)],
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Response:
    return to_response(service.delete(product_id), status.HTTP_204_NO_CONTENT)
