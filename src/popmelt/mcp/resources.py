"""MCP resource definitions — the talent list and single talents.

URIs: talents://list, talents://{talent_id}.
Each resource has a ``*_impl`` function testable without a running server.
A missing talent raises ResourceError, so the read fails instead of
returning content.
"""

from __future__ import annotations

import json
from typing import Any

from mcp.server.fastmcp.exceptions import ResourceError

from popmelt.mcp.responses import guarded, unwrap
from popmelt.services.talents import TalentService

LIST_URI = "talents://list"
TALENT_URI = "talents://{talent_id}"


# ---------------------------------------------------------------------------
# Resource implementations (testable without mcp)
# ---------------------------------------------------------------------------


@guarded("list_talents", "Failed to list talents", ResourceError)
def talents_list_impl(backend: Any) -> list[dict[str, Any]]:
    """``[{id, name, type}, ...]`` for every talent."""
    data = unwrap(TalentService(backend).list_talents(), ResourceError)
    return list(data["items"])


@guarded("get_talent", "Failed to fetch talent", ResourceError)
def talent_impl(backend: Any, talent_id: str) -> dict[str, Any]:
    """The full talent record."""
    return unwrap(TalentService(backend).get_talent(str(talent_id)), ResourceError)


# ---------------------------------------------------------------------------
# Registration — wraps _impl functions with FastMCP decorators
# ---------------------------------------------------------------------------


def register_resources(server: Any, backend: Any) -> None:
    """Register both talent resources on the FastMCP server."""

    @server.resource(LIST_URI, name="talents_list", mime_type="application/json")  # type: ignore[untyped-decorator]
    def talents_list() -> str:
        """Every talent as ``{id, name, type}``."""
        return json.dumps(talents_list_impl(backend))

    @server.resource(TALENT_URI, name="talent", mime_type="application/json")  # type: ignore[untyped-decorator]
    def talent(talent_id: str) -> str:
        """One talent profile by ID."""
        return json.dumps(talent_impl(backend, talent_id))
