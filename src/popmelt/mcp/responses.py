"""Result unwrapping shared by MCP tools and resources.

Handlers hand back plain payloads on success. A failed ServiceResult, or any
unexpected exception, is raised as a FastMCP error so the client receives an
error-flagged response instead of a normal one.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar

import structlog
from mcp.server.fastmcp.exceptions import FastMCPError, ToolError

from popmelt.services.result import ServiceResult

log = structlog.get_logger("popmelt.mcp")

_P = ParamSpec("_P")
_R = TypeVar("_R")


def unwrap(
    result: ServiceResult,
    error_cls: type[FastMCPError] = ToolError,
) -> dict[str, Any]:
    """Return ``result.data``, or raise *error_cls* carrying the error message.

    Warnings (such as serving sample data after a store failure) have no
    place in a bare payload, so they are logged.
    """
    for warning in result.warnings:
        log.warning("result.warning", op=result.op, warning=warning)
    if result.ok:
        return result.data
    err = result.error
    message = f"{err.code}: {err.message}" if err else f"{result.op} failed"
    raise error_cls(message)


def guarded(
    op: str,
    message: str,
    error_cls: type[FastMCPError] = ToolError,
) -> Callable[[Callable[_P, _R]], Callable[_P, _R]]:
    """Log anything unexpected a handler raises and re-raise it as *error_cls*.

    FastMCP errors raised on purpose (via :func:`unwrap`) pass through as-is.
    """

    def decorator(func: Callable[_P, _R]) -> Callable[_P, _R]:
        @functools.wraps(func)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
            try:
                return func(*args, **kwargs)
            except FastMCPError:
                raise
            except Exception as exc:
                log.exception("handler.failed", op=op)
                raise error_cls(f"INTERNAL: {message}") from exc

        return wrapper

    return decorator
