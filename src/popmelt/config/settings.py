"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SUPABASE_URL``/``SUPABASE_KEY``/``DEBUG`` as-is,
                    everything else under the ``POPMELT_`` prefix
  3. TOML file    — ``popmelt.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from popmelt.config.models import McpConfig, StoreConfig

CONFIG_FILENAME = "popmelt.toml"
CONFIG_ENV_VAR = "POPMELT_CONFIG"

_FALSY = frozenset({"", "0", "false", "no", "off"})


def find_config(start: Path | None = None) -> Path | None:
    """Locate ``popmelt.toml`` in *start* (default: cwd) or any parent.

    ``POPMELT_CONFIG`` wins when set; it must name an existing file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``popmelt.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class PopmeltSettings(BaseSettings):
    """Settings for the CLI and the MCP server.

    Attributes:
        supabase_url: Project URL; empty means sample-data mode.
        supabase_key: API key; empty means sample-data mode.
        debug: Verbose diagnostics, enabled by any non-falsy ``DEBUG`` value.
        config_path: The TOML file the settings were loaded from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "POPMELT_",
        "env_nested_delimiter": "__",
    }

    supabase_url: str = Field(
        default="", validation_alias=AliasChoices("supabase_url", "SUPABASE_URL")
    )
    supabase_key: str = Field(
        default="", validation_alias=AliasChoices("supabase_key", "SUPABASE_KEY")
    )
    debug: bool = Field(default=False, validation_alias=AliasChoices("debug", "DEBUG"))

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    store: StoreConfig = Field(default_factory=StoreConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @field_validator("debug", mode="before")
    @classmethod
    def _truthy_debug(cls, value: Any) -> Any:
        # DEBUG is commonly set to things like "1", "true" or "app:*".
        if isinstance(value, str):
            return value.strip().lower() not in _FALSY
        return value

    @property
    def store_configured(self) -> bool:
        """True when both Supabase credentials are present."""
        return bool(self.supabase_url and self.supabase_key)

    @property
    def debug_logging(self) -> bool:
        return self.debug or self.verbose

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> PopmeltSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when it names a file, otherwise
        discovers ``popmelt.toml`` from *start*. CLI flags are merged as
        highest-priority overrides.
        """
        toml_path: Path | None
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
