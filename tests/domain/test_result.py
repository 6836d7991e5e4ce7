"""Unit tests for Result and Error."""

import pytest

from pos.domain.errors import ProductErrors, validation_failed
from pos.domain.result import Error, Result


class TestResult:

    def test_success_carries_value(self):
        result = Result.success(42)
        assert result.is_success
        assert not result.is_failure
        assert result.value == 42

    def test_success_without_value(self):
        assert Result.success().value is None

    def test_failure_carries_error(self):
        result = Result.failure(ProductErrors.NOT_FOUND)
        assert result.is_failure
        assert result.error.code == "Product.NotFound"

    def test_value_of_failure_raises(self):
        with pytest.raises(ValueError, match="failed result"):
            Result.failure(ProductErrors.NOT_FOUND).value

    def test_error_of_success_raises(self):
        with pytest.raises(ValueError):
            Result.success().error


class TestError:

    def test_str_is_code_and_message(self):
        assert str(Error("Sale.NoItems", "empty")) == "Sale.NoItems: empty"

    def test_errors_compare_by_value(self):
        assert Error("A.B", "x") == Error("A.B", "x")

    def test_validation_failed_joins_violations(self):
        error = validation_failed(["Name is required", "Price must be greater than zero"])
        assert error.code == "Validation.Failed"
        assert error.message == "Name is required; Price must be greater than zero"
