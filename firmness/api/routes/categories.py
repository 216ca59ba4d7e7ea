# firmness/api/routes/categories.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response

from firmness.api.deps import get_category_service, require_roles
from firmness.api.responses import error_response, to_response
from firmness.core.constants import UserRole
from firmness.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from firmness.services.inventory.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])

readers = require_roles(UserRole.ADMIN, UserRole.CUSTOMER)
admins = require_roles(UserRole.ADMIN)


@router.get(
    "",
    response_model=List[CategoryRead],
    summary="List categories",
    dependencies=[Depends(readers)],
)
def list_categories(service: CategoryService = Depends(get_category_service)) -> Response:
    return to_response(service.get_all())


@router.get(
    "/search",
    response_model=List[CategoryRead],
    summary="Search categories by name",
    dependencies=[Depends(readers)],
)
def search_categories(
    term: str = Query("", description="At least two characters, matched ignoring case"),
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return to_response(service.search(term))


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get a single category",
    dependencies=[Depends(readers)],
)
def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return to_response(service.get_by_id(category_id))


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    dependencies=[Depends(admins)],
)
def create_category(
    payload: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return to_response(service.create(payload), status.HTTP_201_CREATED)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Update a category",
    dependencies=[Depends(admins)],
)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    if category_id != payload.id:
        return error_response("Route ID and body ID do not match.", status.HTTP_400_BAD_REQUEST)
    return to_response(service.update(payload))


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a category",
    dependencies=[Depends(admins)],
)
def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> Response:
    return to_response(service.delete(category_id), status.HTTP_204_NO_CONTENT)
