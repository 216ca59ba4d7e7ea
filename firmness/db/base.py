"""SQLAlchemy metadata with every model registered."""
from firmness.models import Base, Category, Product, Role, User  # noqa: F401

__all__ = ["Base"]
