from .base import Base, Entity
from .category import Category
from .product import Product
from .user import Role, User, user_roles

__all__ = ["Base", "Entity", "Category", "Product", "Role", "User", "user_roles"]
