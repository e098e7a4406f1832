"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, popmelt.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from popmelt.domain.types import FallbackPolicy


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    table: str = "talents"
    fallback: FallbackPolicy = FallbackPolicy.DATASET


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    name: str = "Popmelt Talent Profile"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
