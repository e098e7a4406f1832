"""Service layer — talent reads and stylesheet generation returning ServiceResult.

Services may import from domain and infrastructure layers.
They must never import from commands, output, or mcp.
"""
