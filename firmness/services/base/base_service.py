"""
Base service class providing common functionality for domain services.
"""

import logging
from typing import Any, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError

from firmness.repositories.base import GenericRepository
from firmness.services.base.service_result import ServiceResult

TModel = TypeVar("TModel")

MIN_SEARCH_LENGTH = 2


class BaseService(Generic[TModel]):
    """
    Base service with common behaviors:
    - Shared logger named after the concrete service
    - Identifier validation
    - Conversion of storage faults into generic failures
    """

    #: Human readable entity name used in messages ("Product", "Category")
    entity_name: str = "Entity"

    def __init__(self, repository: GenericRepository[TModel]):
        self.repository = repository
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def _invalid_id(self, entity_id: int) -> Optional[ServiceResult]:
        """
        Failure for identifiers that can never exist, checked before any lookup.

        Returns None when the id is acceptable. Callers test ``is not None``:
        a failed ``ServiceResult`` is itself falsy.
        """
        if entity_id <= 0:
            return ServiceResult.validation_failure(
                f"The {self.entity_name.lower()} id must be greater than 0",
                field="id",
            )
        return None

    def _handle_exception(
        self,
        exception: SQLAlchemyError,
        operation: str,
        user_message: str,
        entity_ref: Optional[Any] = None,
    ) -> ServiceResult:
        """
        Log a storage fault, discard staged changes and return a generic failure.

        The raw driver message is logged but never placed in the result.
        """
        self._logger.error(
            f"Error during {operation}: {exception}",
            exc_info=True,
            extra={
                "operation": operation,
                "entity_ref": str(entity_ref) if entity_ref is not None else None,
                "exception_type": type(exception).__name__,
            },
        )
        try:
            self.repository.rollback()
        except SQLAlchemyError:
            self._logger.exception(f"Rollback failed after {operation}")
        return ServiceResult.internal_error(user_message)

    def _invalid_search_term(self, term: Optional[str]) -> Optional[ServiceResult]:
        """Failure for blank terms or terms shorter than ``MIN_SEARCH_LENGTH``."""
        if term is None or not term.strip():
            return ServiceResult.validation_failure(
                "The search term cannot be empty.", field="term"
            )
        if len(term) < MIN_SEARCH_LENGTH:
            return ServiceResult.validation_failure(
                f"The search term must be at least {MIN_SEARCH_LENGTH} characters long",
                field="term",
            )
        return None
