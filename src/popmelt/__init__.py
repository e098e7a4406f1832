"""popmelt — talent profiles and CSS helpers served over MCP."""

__version__ = "1.0.0"
