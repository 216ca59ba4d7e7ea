from .base import GenericRepository
from .user import UserRepository

__all__ = ["GenericRepository", "UserRepository"]
