"""Exception taxonomy for store access.

Not-found is never an exception: lookups return ``None``.
"""

from __future__ import annotations


class PopmeltError(Exception):
    """Base class for popmelt errors."""


class ConfigurationError(PopmeltError):
    """Store credentials are missing or invalid."""


class StoreError(PopmeltError):
    """A remote store call failed.

    The underlying exception is chained as ``__cause__``.

    Attributes:
        operation: Adapter method that failed (e.g. ``"fetch_by_id"``).
        code: PostgREST/Postgres error code when the store reported one.
    """

    def __init__(self, message: str, *, operation: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.code = code
