"""Tests for GenericRepository against in-memory SQLite."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from firmness.models import Category, Product
from firmness.repositories.base import GenericRepository


def _product(category: Category, code: str, name: str = "Cement") -> Product:
    return Product(
        name=name,
        code=code,
        description="",
        price=Decimal("9.99"),
        stock=1,
        is_active=True,
        created_at=datetime.now(timezone.utc),
        category=category,
    )


class TestStagedWrites:
    def test_add_assigns_id_on_commit(self, category_repo: GenericRepository[Category]) -> None:
        category = category_repo.add(Category(name="Tools"))
        assert category.id is None

        affected = category_repo.commit()

        assert affected == 1
        assert category.id > 0
        assert category_repo.get_by_id(category.id) is category

    def test_nothing_persisted_before_commit(
        self,
        category_repo: GenericRepository[Category],
        session_factory,
    ) -> None:
        category_repo.add(Category(name="Tools"))

        with session_factory() as other:
            assert GenericRepository(other, Category).get_all() == []

    def test_rollback_discards_staged_changes(
        self, category_repo: GenericRepository[Category]
    ) -> None:
        category_repo.add(Category(name="Tools"))
        category_repo.rollback()

        assert category_repo.commit() == 0
        assert category_repo.get_all() == []

    def test_update_detached_entity(
        self,
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        detached = make_category("Tools")
        detached.name = "Hand tools"

        category_repo.update(detached)
        category_repo.commit()

        assert category_repo.get_by_id(detached.id).name == "Hand tools"

    def test_delete_then_exists_is_false(
        self,
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        category = make_category("Tools")
        assert category_repo.exists(category.id)

        category_repo.delete(category.id)
        category_repo.commit()

        assert not category_repo.exists(category.id)
        assert category_repo.get_by_id(category.id) is None

    def test_delete_missing_id_is_noop(self, category_repo: GenericRepository[Category]) -> None:
        category_repo.delete(999)
        assert category_repo.commit() == 0

    def test_commit_is_all_or_nothing(
        self,
        product_repo: GenericRepository[Product],
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        category = make_category("Tools")
        good = _product(category_repo.get_by_id(category.id), "OK-1")
        bad = _product(None, "BAD-1")  # missing category violates NOT NULL

        product_repo.add(good)
        product_repo.add(bad)
        with pytest.raises(IntegrityError):
            product_repo.commit()

        assert product_repo.get_all() == []


class TestReads:
    def test_get_all_ordered_by_id(
        self,
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        ids = [make_category(name).id for name in ("B", "A", "C")]
        assert [c.id for c in category_repo.get_all()] == sorted(ids)

    def test_get_all_returns_untracked_snapshot(
        self,
        session: Session,
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        make_category("Tools")

        rows = category_repo.get_all()
        rows[0].name = "Changed"

        assert rows[0] not in session
        assert category_repo.commit() == 0
        assert category_repo.get_all()[0].name == "Tools"

    def test_find_and_first_or_default(
        self,
        category_repo: GenericRepository[Category],
        make_category,
    ) -> None:
        make_category("Tools")
        paint = make_category("Paint")

        assert [c.id for c in category_repo.find(Category.name == "Paint")] == [paint.id]
        assert category_repo.first_or_default(Category.name == "Paint").id == paint.id
        assert category_repo.first_or_default(Category.name == "Missing") is None
        assert category_repo.find(Category.name == "Missing") == []

    def test_get_by_id_missing(self, product_repo: GenericRepository[Product]) -> None:
        assert product_repo.get_by_id(12345) is None
        assert not product_repo.exists(12345)
