"""Shared pytest fixtures for the firmness test suite."""

from __future__ import annotations

import os

# Settings are read at import time; the signing key has no default.
os.environ["JWT_KEY"] = "test-signing-key-with-at-least-32-characters"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["PASSWORD_BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FORMAT"] = "text"
os.environ["ENVIRONMENT"] = "testing"

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Dict, Iterable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from firmness.api.deps import get_password_hasher, get_token_service
from firmness.core.constants import UserRole
from firmness.core.security.jwt_handler import TokenService
from firmness.core.security.password_hasher import PasswordHasher
from firmness.db.base import Base
from firmness.db.init_db import drop_db, seed_roles
from firmness.db.session import create_session_factory, enable_sqlite_foreign_keys, get_db
from firmness.models import Category, Product
from firmness.repositories import GenericRepository, UserRepository
from firmness.services.auth import AuthService
from firmness.services.common.permissions import Principal
from firmness.services.inventory import CategoryService, ProductService


@pytest.fixture
def engine() -> Engine:
    """In-memory SQLite shared by every connection of one test."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(eng)
    Base.metadata.create_all(bind=eng)
    try:
        yield eng
    finally:
        drop_db(eng)
        eng.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    factory = create_session_factory(engine)
    with factory() as db:
        seed_roles(db)
    return factory


@pytest.fixture
def session(session_factory: sessionmaker) -> Session:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def product_repo(session: Session) -> GenericRepository[Product]:
    return GenericRepository(session, Product)


@pytest.fixture
def category_repo(session: Session) -> GenericRepository[Category]:
    return GenericRepository(session, Category)


@pytest.fixture
def product_service(
    product_repo: GenericRepository[Product],
    category_repo: GenericRepository[Category],
) -> ProductService:
    return ProductService(products=product_repo, categories=category_repo)


@pytest.fixture
def category_service(
    category_repo: GenericRepository[Category],
    product_repo: GenericRepository[Product],
) -> CategoryService:
    return CategoryService(categories=category_repo, products=product_repo)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return get_token_service()


@pytest.fixture
def auth_service(session: Session, hasher: PasswordHasher, token_service: TokenService) -> AuthService:
    return AuthService(users=UserRepository(session), hasher=hasher, tokens=token_service)


@pytest.fixture
def make_category(session_factory: sessionmaker) -> Callable[..., Category]:
    """Insert a category outside the session under test."""

    def _make(name: str = "Building materials") -> Category:
        with session_factory() as db:
            category = Category(name=name)
            db.add(category)
            db.commit()
            return category

    return _make


@pytest.fixture
def make_product(session_factory: sessionmaker) -> Callable[..., Product]:
    """Insert a product outside the session under test."""

    def _make(category: Category, code: str = "CEM-001", name: str = "Cement") -> Product:
        with session_factory() as db:
            product = Product(
                name=name,
                code=code,
                description="",
                price=Decimal("12.50"),
                stock=10,
                is_active=True,
                created_at=datetime.now(timezone.utc),
                category_id=category.id,
            )
            db.add(product)
            db.commit()
            return product

    return _make


# --------------------------------------------------------------------- #
# HTTP
# --------------------------------------------------------------------- #
@pytest.fixture
def client(session_factory: sessionmaker) -> TestClient:
    from firmness.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: PasswordHasher(rounds=4)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _headers_for(roles: Iterable[str], subject_id: str) -> Dict[str, str]:
    principal = Principal(subject_id=subject_id, email=f"{subject_id}@example.com", roles=roles)
    return {"Authorization": f"Bearer {get_token_service().issue(principal)}"}


@pytest.fixture
def headers_for() -> Callable[..., Dict[str, str]]:
    """Authorization headers carrying a freshly issued token for the given roles."""
    return _headers_for


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return _headers_for([UserRole.ADMIN], subject_id="admin-1")


@pytest.fixture
def customer_headers() -> Dict[str, str]:
    return _headers_for([UserRole.CUSTOMER], subject_id="customer-1")
