"""
API router - aggregates all endpoints under the configured prefix.
"""
from fastapi import APIRouter

from firmness.api.routes import auth, categories, products

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
    }
)

router.include_router(auth.router)
router.include_router(products.router)
router.include_router(categories.router)
