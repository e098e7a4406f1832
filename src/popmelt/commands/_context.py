"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. The backend is built lazily so ``--help`` and
``--version`` never touch the store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from popmelt.config.logging import configure_logging
from popmelt.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from popmelt.config.settings import PopmeltSettings
    from popmelt.infrastructure.backend import Backend
    from popmelt.services.result import ServiceResult


class AppContext:
    """Settings plus a lazily created backend."""

    def __init__(self, settings: PopmeltSettings) -> None:
        self.settings = settings
        self._backend: Backend | None = None
        configure_logging(debug=settings.debug_logging, log_json=settings.log_json)

    @property
    def backend(self) -> Backend:
        """The backend (created on first access)."""
        if self._backend is None:
            from popmelt.infrastructure.backend import Backend

            self._backend = Backend.from_settings(self.settings)
        return self._backend

    def emit(self, result: ServiceResult) -> None:
        """Write a ServiceResult with the right stream and exit code.

        Success goes to stdout; warnings go to stderr outside JSON mode.
        Failure goes to stderr and exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
