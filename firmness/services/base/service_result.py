"""
Service result patterns for standardized response handling.

Every domain service returns a ``ServiceResult`` instead of raising for
expected business failures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Optional, TypeVar


class ErrorCode(str, Enum):
    """Standard error codes for service operations."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    field: Optional[str] = None

    def __post_init__(self):
        if not self.message or not self.message.strip():
            raise ValueError("A service error requires a non-empty message")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "field": self.field,
        }


TData = TypeVar("TData")
TOther = TypeVar("TOther")


@dataclass(frozen=True)
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Build instances through ``success`` / ``failure`` (or the failure
    shortcuts). The payload is only reachable through ``data`` and reading it
    from a failed result raises ``ValueError``.

    Attributes:
        is_success: Operation success indicator
        error: Error information (if failed)
    """

    is_success: bool
    error: Optional[ServiceError] = None
    _data: Optional[TData] = field(default=None, repr=False)

    def __post_init__(self):
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success and self.error is None:
            raise ValueError("A failed result requires an error")
        if not self.is_success and self._data is not None:
            raise ValueError("A failed result cannot carry data")

    @classmethod
    def success(cls, data: Optional[TData] = None) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(is_success=True, _data=data)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(is_success=False, error=error)

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a validation failure result."""
        return cls.failure(
            ServiceError(code=ErrorCode.VALIDATION_ERROR, message=message, field=field)
        )

    @classmethod
    def not_found(cls, resource_type: str, resource_id: Any) -> "ServiceResult[TData]":
        """
        Create a not found failure result.

        The message keeps the "<Entity> with ID <id> not found" form; the
        HTTP layer keys its 404 response on the "not found" wording.
        """
        return cls.failure(
            ServiceError(
                code=ErrorCode.NOT_FOUND,
                message=f"{resource_type} with ID {resource_id} not found",
            )
        )

    @classmethod
    def conflict(cls, message: str, field: Optional[str] = None) -> "ServiceResult[TData]":
        """Create a conflict failure result."""
        return cls.failure(
            ServiceError(code=ErrorCode.ALREADY_EXISTS, message=message, field=field)
        )

    @classmethod
    def internal_error(cls, message: str) -> "ServiceResult[TData]":
        """Create a failure for an infrastructure fault; ``message`` must be generic."""
        return cls.failure(ServiceError(code=ErrorCode.INTERNAL_ERROR, message=message))

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def data(self) -> TData:
        """
        Result payload.

        Raises:
            ValueError: If the result is not successful
        """
        if not self.is_success:
            raise ValueError(f"Cannot read data from a failed result: {self.error.message}")
        return self._data

    @property
    def message(self) -> Optional[str]:
        """Failure message, or None for a success."""
        return self.error.message if self.error else None

    def unwrap_or(self, default: TData) -> TData:
        """Return the data, or ``default`` if failed."""
        return self._data if self.is_success else default

    def map(self, func: Callable[[TData], TOther]) -> "ServiceResult[TOther]":
        """Map the result data through a function if successful."""
        if self.is_success:
            return ServiceResult.success(func(self._data))
        return ServiceResult.failure(self.error)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary representation."""
        if self.is_success:
            return {"is_success": True, "data": self._data}
        return {"is_success": False, "error": self.error.to_dict()}

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return "ServiceResult(Success)"
        return f"ServiceResult(Failure: {self.error.message})"


# Result of an operation that carries no data
Result = ServiceResult[None]


__all__ = [
    "ErrorCode",
    "ServiceError",
    "ServiceResult",
    "Result",
]
