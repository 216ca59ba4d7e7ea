# firmness/services/inventory/category_service.py
"""
Business logic for product categories.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from firmness.models import Category, Product
from firmness.repositories.base import GenericRepository
from firmness.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from firmness.services.base.base_service import BaseService
from firmness.services.base.service_result import Result, ServiceResult
from firmness.services.common.mapping import (
    apply_category_update,
    categories_to_read,
    category_from_create,
    category_to_read,
)


class CategoryService(BaseService[Category]):
    """Category operations; a category is only removable once it has no products."""

    entity_name = "Category"

    def __init__(
        self,
        categories: GenericRepository[Category],
        products: GenericRepository[Product],
    ):
        super().__init__(categories)
        self.products = products

    def get_all(self) -> ServiceResult[List[CategoryRead]]:
        try:
            return ServiceResult.success(categories_to_read(self.repository.get_all()))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "retrieve all categories", "Error loading categories. Please try again."
            )

    def get_by_id(self, category_id: int) -> ServiceResult[CategoryRead]:
        invalid = self._invalid_id(category_id)
        if invalid is not None:
            return invalid

        try:
            category = self.repository.get_by_id(category_id)
            if category is None:
                self._logger.warning(f"Category with ID {category_id} not found")
                return ServiceResult.not_found(self.entity_name, category_id)
            return ServiceResult.success(category_to_read(category))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "retrieve category", "Error loading category. Please try again.", category_id
            )

    def create(self, payload: CategoryCreate) -> ServiceResult[CategoryRead]:
        try:
            category = self.repository.add(category_from_create(payload))
            self.repository.commit()

            self._logger.info(f"Category '{category.name}' created with ID {category.id}")
            return ServiceResult.success(category_to_read(category))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "create category", "Error creating category. Please try again.", payload.name
            )

    def update(self, payload: CategoryUpdate) -> ServiceResult[CategoryRead]:
        invalid = self._invalid_id(payload.id)
        if invalid is not None:
            return invalid

        try:
            category = self.repository.get_by_id(payload.id)
            if category is None:
                self._logger.warning(
                    f"Attempt to update non-existent category with ID {payload.id}"
                )
                return ServiceResult.not_found(self.entity_name, payload.id)

            apply_category_update(category, payload)
            self.repository.update(category)
            self.repository.commit()

            self._logger.info(f"Updated '{category.name}' category (ID: {category.id})")
            return ServiceResult.success(category_to_read(category))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "update category", "Category update failed. Please try again.", payload.id
            )

    def delete(self, category_id: int) -> Result:
        invalid = self._invalid_id(category_id)
        if invalid is not None:
            return invalid

        try:
            if not self.repository.exists(category_id):
                self._logger.warning(
                    f"Attempt to delete non-existent category with ID {category_id}"
                )
                return ServiceResult.not_found(self.entity_name, category_id)

            if self.products.find(Product.category_id == category_id):
                return ServiceResult.validation_failure(
                    f"The category with ID {category_id} still has products "
                    "and cannot be deleted."
                )

            self.repository.delete(category_id)
            self.repository.commit()

            self._logger.info(f"Category with ID {category_id} removed")
            return ServiceResult.success()
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "delete category", "Error deleting the category. Please try again.",
                category_id,
            )

    def search(self, term: Optional[str]) -> ServiceResult[List[CategoryRead]]:
        """Case-insensitive substring match on the category name."""
        invalid = self._invalid_search_term(term)
        if invalid is not None:
            return invalid

        needle = term.casefold()
        try:
            matches = [c for c in self.repository.get_all() if needle in c.name.casefold()]
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "search categories", "Error searching for categories. Please try again.",
                term,
            )

        self._logger.info(
            f"Searching for categories with the term '{term}' returned {len(matches)} results"
        )
        return ServiceResult.success(categories_to_read(matches))

    def exists(self, category_id: int) -> ServiceResult[bool]:
        invalid = self._invalid_id(category_id)
        if invalid is not None:
            return invalid

        try:
            return ServiceResult.success(self.repository.exists(category_id))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "check category existence", "Error checking the category. Please try again.",
                category_id,
            )
