"""serve — run the MCP server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from popmelt.commands._base import PopCommand

if TYPE_CHECKING:
    from popmelt.commands._context import AppContext


@click.command(
    cls=PopCommand,
    examples="""\
  # stdio transport (what MCP clients launch)
  popmelt serve

  # Streamable HTTP on a custom host/port
  popmelt serve --transport streamable-http --host 0.0.0.0 --port 9000

  # Debug logging to stderr
  DEBUG=1 popmelt serve""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default: [mcp] transport, else stdio).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Start the talent profile MCP server."""
    from popmelt.config.logging import configure_logging
    from popmelt.mcp.server import create_server

    settings = app.settings
    configure_logging(debug=settings.debug_logging, log_json=settings.log_json, level=logging.INFO)

    server = create_server(backend=app.backend, host=host, port=port)
    server.run(transport=transport or settings.mcp.transport)
