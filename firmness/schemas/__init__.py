from .auth import LoginRequest, RegisterRequest, TokenResponse, UserRead
from .category import CategoryCreate, CategoryRead, CategoryUpdate
from .product import ProductCreate, ProductRead, ProductUpdate

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "TokenResponse",
    "UserRead",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "ProductCreate",
    "ProductRead",
    "ProductUpdate",
]
