"""Tests for the service result types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from popmelt.infrastructure.errors import StoreError
from popmelt.services.result import ServiceError, ServiceResult, StoreAttempt


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="list_talents")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="list_talents")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_failure(self) -> None:
        result = ServiceResult.failure("get_talent", "NOT_FOUND", "missing", {"talent_id": "x"})
        assert not result.ok
        assert result.error == ServiceError(
            code="NOT_FOUND", message="missing", detail={"talent_id": "x"}
        )

    def test_failure_without_detail(self) -> None:
        result = ServiceResult.failure("generate_css", "INVALID_ARGUMENT", "bad")
        assert result.error is not None
        assert result.error.detail == {}


class TestStoreAttempt:
    def test_success(self) -> None:
        attempt = StoreAttempt.success([1, 2])
        assert attempt.ok
        assert attempt.value == [1, 2]

    def test_success_with_none(self) -> None:
        assert StoreAttempt.success(None).ok

    def test_failed(self) -> None:
        error = StoreError("boom", operation="fetch_all")
        attempt = StoreAttempt.failed(error)
        assert not attempt.ok
        assert attempt.error is error
        assert attempt.value is None
