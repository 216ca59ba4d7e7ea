# firmness/api/deps.py
"""
FastAPI dependencies: database session, services, and the authentication
and role checks applied to every protected route.

Example usage in a router:
    from fastapi import APIRouter, Depends
    from firmness.api import deps

    router = APIRouter()

    @router.get("/me")
    def read_me(principal = Depends(deps.require_roles(UserRole.ADMIN))):
        return principal
"""
from __future__ import annotations

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Callable, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from firmness.config.settings import settings
from firmness.core.security.access_gate import AccessDecision, authorize
from firmness.core.security.jwt_handler import TokenRejected, TokenService
from firmness.core.security.password_hasher import PasswordHasher
from firmness.db.session import get_db
from firmness.models import Category, Product
from firmness.repositories.base import GenericRepository
from firmness.repositories.user import UserRepository
from firmness.services.auth.auth_service import AuthService
from firmness.services.common.permissions import Principal, RoleLike
from firmness.services.inventory.category_service import CategoryService
from firmness.services.inventory.product_service import ProductService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# --- Security primitives --------------------------------------------------------

@lru_cache()
def get_token_service() -> TokenService:
    """Token service holding the signing key loaded at startup."""
    return TokenService(
        signing_key=settings.JWT_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expires_delta=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
    )


@lru_cache()
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=settings.PASSWORD_BCRYPT_ROUNDS)


# --- Services ---------------------------------------------------------------------

def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(
        products=GenericRepository(db, Product),
        categories=GenericRepository(db, Category),
    )


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(
        categories=GenericRepository(db, Category),
        products=GenericRepository(db, Product),
    )


def get_auth_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(users=UserRepository(db), hasher=hasher, tokens=tokens)


# --- Authentication & Authorization -------------------------------------------

def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Principal:
    """Validate the bearer token; any rejection ends the request with 401."""
    if credentials is None:
        raise _unauthorized("Not authenticated")

    outcome = tokens.validate(credentials.credentials)
    if isinstance(outcome, TokenRejected):
        raise _unauthorized(f"Invalid token: {outcome.reason.value}")

    request.state.principal = outcome
    return outcome


def require_roles(*roles: RoleLike) -> Callable[..., Principal]:
    """Dependency allowing principals holding at least one of ``roles``."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if authorize(principal, roles) is AccessDecision.DENIED:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role for this operation",
            )
        return principal

    return dependency


__all__ = [
    "bearer_scheme",
    "get_db",
    "get_token_service",
    "get_password_hasher",
    "get_product_service",
    "get_category_service",
    "get_auth_service",
    "get_current_principal",
    "require_roles",
]
