"""env — check which Supabase credentials the process can see."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from popmelt.commands._base import PopCommand
from popmelt.services.environment import check_environment

if TYPE_CHECKING:
    from popmelt.commands._context import AppContext


@click.command(
    cls=PopCommand,
    examples="""\
  popmelt env
  SUPABASE_URL=https://abc.supabase.co SUPABASE_KEY=... popmelt env""",
)
@click.pass_obj
def env(app: AppContext) -> None:
    """Report SUPABASE_URL / SUPABASE_KEY presence (values masked)."""
    app.emit(check_environment(app.settings))
