"""Result types for the service layer.

:class:`ServiceResult` is what every service method returns; the CLI and the
MCP handlers both consume it. :class:`StoreAttempt` is the internal outcome
of a single store call, so that the caller decides whether a failure falls
back to sample data or is surfaced.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from popmelt.infrastructure.errors import StoreError

T = TypeVar("T")


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"query_talents"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as serving fallback data.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata; reads record their ``source`` here.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)


@dataclass(frozen=True)
class StoreAttempt(Generic[T]):
    """Outcome of one store call: a value, or the StoreError that stopped it."""

    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> StoreAttempt[T]:
        return cls(value=value)

    @classmethod
    def failed(cls, error: StoreError) -> StoreAttempt[T]:
        return cls(error=error)
