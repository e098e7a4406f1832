"""MCP tool definitions — criteria queries and CSS generation.

Each tool has a ``*_impl`` function testable without a running server.
``register_tools()`` wraps them with FastMCP decorators. Failures raise
ToolError, which FastMCP reports as an error result.
"""

from __future__ import annotations

from typing import Any

from popmelt.domain.types import ComponentKind, VisualState
from popmelt.mcp.responses import guarded, unwrap
from popmelt.services.styles import StyleService
from popmelt.services.talents import TalentService


@guarded("query_talents", "Failed to query talents")
def query_talents_impl(
    backend: Any, criteria: dict[str, Any] | None = None
) -> list[dict[str, Any]]:
    """Records matching every criterion; no criteria returns all of them."""
    data = unwrap(TalentService(backend).query_talents(criteria or {}))
    return list(data["items"])


@guarded("generate_css", "Failed to generate CSS")
def generate_css_impl(
    backend: Any,
    talent_id: str,
    component: ComponentKind | str,
    *,
    state: VisualState | str = VisualState.DEFAULT,
    custom_properties: dict[str, str | int | float] | None = None,
) -> str:
    """The stylesheet text for a component."""
    result = StyleService(backend).generate_css(
        talent_id, component, state=state, custom_properties=custom_properties
    )
    return str(unwrap(result)["css"])


# ---------------------------------------------------------------------------
# Registration — wraps _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_tools(server: Any, backend: Any) -> None:
    """Register both tools on the FastMCP server."""

    @server.tool(name="query_talents")  # type: ignore[untyped-decorator]
    def query_talents(criteria: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        """Find talent profiles by field criteria.

        ``keywords`` matches an aesthetic keyword, ``type`` matches exactly,
        any other field is a case-insensitive substring match.
        """
        return query_talents_impl(backend, criteria)

    @server.tool(name="generate_css")  # type: ignore[untyped-decorator]
    def generate_css(
        talent_id: str,
        component: ComponentKind,
        state: VisualState = VisualState.DEFAULT,
        custom_properties: dict[str, str | int | float] | None = None,
    ) -> str:
        """Generate CSS for a UI component based on a talent profile."""
        return generate_css_impl(
            backend,
            talent_id,
            component,
            state=state,
            custom_properties=custom_properties,
        )
