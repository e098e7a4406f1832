"""FastMCP server setup.

Transport: stdio by default; SSE and streamable HTTP are optional. Logging is
routed to stderr so the stdio message stream stays clean.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import structlog
from mcp.server.fastmcp import FastMCP

from popmelt.config.logging import configure_logging
from popmelt.config.settings import PopmeltSettings
from popmelt.infrastructure.backend import Backend
from popmelt.mcp.resources import register_resources
from popmelt.mcp.tools import register_tools

if TYPE_CHECKING:
    from popmelt.infrastructure.store import ClientFactory

__all__ = ["create_server", "main"]


def create_server(
    settings: PopmeltSettings | None = None,
    *,
    backend: Backend | None = None,
    client_factory: ClientFactory | None = None,
    host: str | None = None,
    port: int | None = None,
) -> FastMCP:
    """Create and configure the MCP server.

    Builds a :class:`Backend` from *settings* (or the environment) unless one
    is supplied, then registers the tools and resources. *host* and *port*
    only matter for HTTP transports.
    """
    if settings is None:
        settings = backend.settings if backend is not None else PopmeltSettings.from_cli()
    if backend is None:
        backend = Backend.from_settings(settings, client_factory=client_factory)

    server = FastMCP(
        settings.mcp.name,
        host=host or settings.mcp.host,
        port=port or settings.mcp.port,
    )

    register_tools(server, backend)
    register_resources(server, backend)

    return server


def main() -> None:
    """Console entry point: serve over the configured transport."""
    settings = PopmeltSettings.from_cli()
    configure_logging(
        debug=settings.debug_logging, log_json=settings.log_json, level=logging.INFO
    )

    log = structlog.get_logger("popmelt.mcp")
    server = create_server(settings)
    log.info("server.starting", name=settings.mcp.name, transport=settings.mcp.transport)
    server.run(transport=settings.mcp.transport)  # type: ignore[arg-type]
    log.info("server.stopped")
