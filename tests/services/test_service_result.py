"""Tests for the ServiceResult success/failure type."""

from __future__ import annotations

import pytest

from firmness.services.base.service_result import ErrorCode, ServiceError, ServiceResult


class TestServiceResultConstruction:
    def test_success_carries_data(self) -> None:
        result = ServiceResult.success({"id": 1})
        assert result.is_success
        assert not result.is_failure
        assert result.data == {"id": 1}
        assert result.error is None
        assert result.message is None

    def test_success_without_data(self) -> None:
        result = ServiceResult.success()
        assert result.is_success
        assert result.data is None

    def test_failure_carries_message(self) -> None:
        result = ServiceResult.validation_failure("The term is too short", field="term")
        assert result.is_failure
        assert result.error.code is ErrorCode.VALIDATION_ERROR
        assert result.error.field == "term"
        assert result.message == "The term is too short"

    def test_not_found_message_format(self) -> None:
        result = ServiceResult.not_found("Product", 42)
        assert result.error.code is ErrorCode.NOT_FOUND
        assert result.message == "Product with ID 42 not found"

    def test_conflict_code(self) -> None:
        result = ServiceResult.conflict("A product with the code 'X' already exists.")
        assert result.error.code is ErrorCode.ALREADY_EXISTS

    def test_internal_error_code(self) -> None:
        result = ServiceResult.internal_error("Error loading products. Please try again.")
        assert result.error.code is ErrorCode.INTERNAL_ERROR

    def test_empty_failure_message_rejected(self) -> None:
        with pytest.raises(ValueError):
            ServiceResult.validation_failure("")

    def test_blank_failure_message_rejected(self) -> None:
        with pytest.raises(ValueError):
            ServiceError(code=ErrorCode.VALIDATION_ERROR, message="   ")

    def test_success_cannot_carry_error(self) -> None:
        error = ServiceError(code=ErrorCode.NOT_FOUND, message="gone")
        with pytest.raises(ValueError):
            ServiceResult(is_success=True, error=error)

    def test_failure_requires_error(self) -> None:
        with pytest.raises(ValueError):
            ServiceResult(is_success=False)


class TestServiceResultAccess:
    def test_reading_data_of_failure_raises(self) -> None:
        result = ServiceResult.not_found("Category", 3)
        with pytest.raises(ValueError, match="Category with ID 3 not found"):
            _ = result.data

    def test_unwrap_or(self) -> None:
        assert ServiceResult.success(5).unwrap_or(0) == 5
        assert ServiceResult.not_found("Product", 1).unwrap_or(0) == 0

    def test_map_success(self) -> None:
        assert ServiceResult.success(2).map(lambda x: x * 10).data == 20

    def test_map_failure_keeps_error(self) -> None:
        failed = ServiceResult.not_found("Product", 1)
        mapped = failed.map(lambda x: x * 10)
        assert mapped.is_failure
        assert mapped.error == failed.error

    def test_truthiness(self) -> None:
        assert ServiceResult.success()
        assert not ServiceResult.validation_failure("nope")

    def test_to_dict(self) -> None:
        assert ServiceResult.success([1]).to_dict() == {"is_success": True, "data": [1]}
        assert ServiceResult.conflict("dup", field="code").to_dict() == {
            "is_success": False,
            "error": {"code": "ALREADY_EXISTS", "message": "dup", "field": "code"},
        }

    def test_results_are_immutable(self) -> None:
        result = ServiceResult.success(1)
        with pytest.raises(AttributeError):
            result.is_success = False  # type: ignore[misc]
