# firmness/services/inventory/product_service.py
"""
Business logic for products: retrieval, creation, update, deletion and search.

Every operation returns a ``ServiceResult``. Storage faults are logged and
reported with a generic message.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from firmness.models import Category, Product
from firmness.repositories.base import GenericRepository
from firmness.schemas.product import ProductCreate, ProductRead, ProductUpdate
from firmness.services.base.base_service import BaseService
from firmness.services.base.service_result import Result, ServiceResult
from firmness.services.common.mapping import (
    apply_product_update,
    product_from_create,
    product_to_read,
    products_to_read,
)


class ProductService(BaseService[Product]):
    """
    Product operations on top of the generic repository.

    Product codes are unique ignoring case. The check scans the whole table
    before the commit, so two concurrent writers can still race.
    """

    entity_name = "Product"

    def __init__(
        self,
        products: GenericRepository[Product],
        categories: GenericRepository[Category],
    ):
        super().__init__(products)
        self.categories = categories

    def get_all(self) -> ServiceResult[List[ProductRead]]:
        try:
            return ServiceResult.success(products_to_read(self.repository.get_all()))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "retrieve all products", "Error loading products. Please try again."
            )

    def get_by_id(self, product_id: int) -> ServiceResult[ProductRead]:
        invalid = self._invalid_id(product_id)
        if invalid is not None:
            return invalid

        try:
            product = self.repository.get_by_id(product_id)
            if product is None:
                self._logger.warning(f"Product with ID {product_id} not found")
                return ServiceResult.not_found(self.entity_name, product_id)
            return ServiceResult.success(product_to_read(product))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "retrieve product", "Error loading product. Please try again.", product_id
            )

    def create(self, payload: ProductCreate) -> ServiceResult[ProductRead]:
        try:
            if self._code_taken(payload.code):
                return self._duplicate_code(payload.code)

            category = self.categories.get_by_id(payload.category_id)
            if category is None:
                return self._invalid_category(payload.category_id)

            product = self.repository.add(product_from_create(payload, category))
            self.repository.commit()

            self._logger.info(f"Product '{product.name}' created with ID {product.id}")
            return ServiceResult.success(product_to_read(product))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "create product", "Error creating product. Please try again.", payload.code
            )

    def update(self, payload: ProductUpdate) -> ServiceResult[ProductRead]:
        invalid = self._invalid_id(payload.id)
        if invalid is not None:
            return invalid

        try:
            product = self.repository.get_by_id(payload.id)
            if product is None:
                self._logger.warning(
                    f"Attempt to update non-existent product with ID {payload.id}"
                )
                return ServiceResult.not_found(self.entity_name, payload.id)

            if self._code_taken(payload.code, exclude_id=payload.id):
                return self._duplicate_code(payload.code)

            category = self.categories.get_by_id(payload.category_id)
            if category is None:
                return self._invalid_category(payload.category_id)

            apply_product_update(product, payload, category)
            self.repository.update(product)
            self.repository.commit()

            self._logger.info(f"Updated '{product.name}' product (ID: {product.id})")
            return ServiceResult.success(product_to_read(product))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "update product", "Product update failed. Please try again.", payload.id
            )

    def delete(self, product_id: int) -> Result:
        invalid = self._invalid_id(product_id)
        if invalid is not None:
            return invalid

        try:
            if not self.repository.exists(product_id):
                self._logger.warning(
                    f"Attempt to delete non-existent product with ID {product_id}"
                )
                return ServiceResult.not_found(self.entity_name, product_id)

            self.repository.delete(product_id)
            self.repository.commit()

            self._logger.info(f"Product with ID {product_id} removed")
            return ServiceResult.success()
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "delete product", "Error deleting the product. Please try again.", product_id
            )

    def search(self, term: Optional[str]) -> ServiceResult[List[ProductRead]]:
        """Case-insensitive substring match on name or code across all products."""
        invalid = self._invalid_search_term(term)
        if invalid is not None:
            return invalid

        needle = term.casefold()
        try:
            matches = [
                p
                for p in self.repository.get_all()
                if needle in p.name.casefold() or needle in p.code.casefold()
            ]
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "search products", "Error searching for products. Please try again.", term
            )

        self._logger.info(
            f"Searching for products with the term '{term}' returned {len(matches)} results"
        )
        return ServiceResult.success(products_to_read(matches))

    def exists(self, product_id: int) -> ServiceResult[bool]:
        invalid = self._invalid_id(product_id)
        if invalid is not None:
            return invalid

        try:
            return ServiceResult.success(self.repository.exists(product_id))
        except SQLAlchemyError as e:
            return self._handle_exception(
                e, "check product existence", "Error checking the product. Please try again.",
                product_id,
            )

    # ------------------------------------------------------------------ #
    # Business rules
    # ------------------------------------------------------------------ #
    def _code_taken(self, code: str, exclude_id: Optional[int] = None) -> bool:
        wanted = code.casefold()
        return any(
            p.code.casefold() == wanted
            for p in self.repository.get_all()
            if exclude_id is None or p.id != exclude_id
        )

    @staticmethod
    def _duplicate_code(code: str) -> ServiceResult:
        return ServiceResult.conflict(
            f"A product with the code '{code}' already exists.", field="code"
        )

    @staticmethod
    def _invalid_category(category_id: int) -> ServiceResult:
        return ServiceResult.validation_failure(
            f"The category ID {category_id} is not valid", field="category_id"
        )
