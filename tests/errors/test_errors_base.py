"""Tests for the structured error model."""

from __future__ import annotations

from typing import Any

import pytest

from jolien.errors import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    JolienError,
    registry,
)
from jolien.errors.base import _Node

SAMPLE: ErrorCategory = ErrorCategory.get_or_create("SAMPLE")
SAMPLE_FAILURE: ErrorCode = ErrorCode.get_or_create("SAMPLE_FAILURE", SAMPLE)


class SampleError(JolienError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, code=SAMPLE_FAILURE, **kwargs)


class TestErrorCategory:
    def test_get_or_create_returns_same_instance(self) -> None:
        assert ErrorCategory.get_or_create("SAMPLE") is SAMPLE

    def test_subcategory(self) -> None:
        child = ErrorCategory("SAMPLE_CHILD", parent=SAMPLE)
        assert child.is_subcategory_of(SAMPLE)
        assert child.is_subcategory_of(child)
        assert not SAMPLE.is_subcategory_of(child)

    def test_equality_is_by_name(self) -> None:
        assert ErrorCategory("SAMPLE") == SAMPLE
        assert hash(ErrorCategory("SAMPLE")) == hash(SAMPLE)
        assert SAMPLE != "SAMPLE"

    def test_get_by_name(self) -> None:
        assert ErrorCategory.get_by_name("SAMPLE") is SAMPLE
        assert ErrorCategory.get_by_name("NO_SUCH_CATEGORY") is None


class TestErrorCode:
    def test_get_by_code(self) -> None:
        assert ErrorCode.get_by_code("SAMPLE_FAILURE") is SAMPLE_FAILURE

    def test_get_by_code_missing_raises(self) -> None:
        with pytest.raises(ValueError, match="NO_SUCH_CODE"):
            ErrorCode.get_by_code("NO_SUCH_CODE")

    def test_get_by_code_missing_without_raise(self) -> None:
        assert ErrorCode.get_by_code("NO_SUCH_CODE", raise_if_missing=False) is None

    def test_default_category_is_internal(self) -> None:
        assert ErrorCode("LOOSE_CODE").category == INTERNAL

    def test_subcode(self) -> None:
        child = ErrorCode("SAMPLE_FAILURE_DETAIL", SAMPLE, parent=SAMPLE_FAILURE)
        assert child.is_subcode_of(SAMPLE_FAILURE)
        assert not SAMPLE_FAILURE.is_subcode_of(child)

    def test_registry_lists_codes(self) -> None:
        assert SAMPLE_FAILURE in registry.get_all_codes()
        assert INTERNAL_ERROR in registry.get_all_codes()
        assert SAMPLE in registry.get_all_categories()


class TestNodeContract:
    def test_identity_is_abstract(self) -> None:
        class Unnamed(_Node["Unnamed"]):
            parent = None

        with pytest.raises(TypeError, match="_identity"):
            Unnamed()

    def test_categories_and_codes_implement_identity(self) -> None:
        assert str(SAMPLE) == "SAMPLE"
        assert repr(SAMPLE_FAILURE) == "ErrorCode('SAMPLE_FAILURE')"


class TestJolienError:
    def test_base_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            JolienError("nope")

    def test_fields(self) -> None:
        error = SampleError("it broke", context={"a": 1}, b=2)

        assert error.message == "it broke"
        assert error.code is SAMPLE_FAILURE
        assert error.category is SAMPLE
        assert error.severity is ErrorSeverity.ERROR
        assert error.context == {"a": 1, "b": 2}
        assert error.timestamp.tzinfo is not None

    def test_str(self) -> None:
        assert str(SampleError("it broke")) == "SAMPLE_FAILURE: it broke"

    def test_code_must_be_error_code(self) -> None:
        class LooseError(JolienError):
            pass

        with pytest.raises(TypeError, match="ErrorCode"):
            LooseError("bad", code="SAMPLE_FAILURE")  # type: ignore[arg-type]

    def test_add_context_chains(self) -> None:
        error = SampleError("it broke")
        assert error.add_context("user", "abc").add_context("op", "x") is error
        assert error.context == {"user": "abc", "op": "x"}

    def test_to_dict(self) -> None:
        error = SampleError("it broke", severity=ErrorSeverity.WARNING, key="v")
        data = error.to_dict()

        assert data["code"] == "SAMPLE_FAILURE"
        assert data["message"] == "it broke"
        assert data["category"] == "SAMPLE"
        assert data["severity"] == "warning"
        assert data["context"] == {"key": "v"}
        assert "timestamp" in data

    def test_is_exception(self) -> None:
        with pytest.raises(SampleError) as exc_info:
            raise SampleError("raised")
        assert exc_info.value.args == ("raised",)
