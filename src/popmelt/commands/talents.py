"""Command group: list, show, and query talent profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from popmelt.commands._base import PopGroup, parse_pairs
from popmelt.services.talents import TalentService

if TYPE_CHECKING:
    from popmelt.commands._context import AppContext

_TALENTS_EXAMPLES = """\
  popmelt talents list
  popmelt talents show maya-chen
  popmelt talents query -w type=designer -w keywords=vibrant
  popmelt --json talents query -w name=olivia"""


@click.group(cls=PopGroup, examples=_TALENTS_EXAMPLES)
def talents() -> None:
    """List, show, and query talent profiles."""


@talents.command("list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List every talent (id, name, type)."""
    app.emit(TalentService(app.backend).list_talents())


@talents.command(
    examples="""\
  popmelt talents show maya-chen
  popmelt --json talents show olivia-gray"""
)
@click.argument("talent_id")
@click.pass_obj
def show(app: AppContext, talent_id: str) -> None:
    """Show one talent profile."""
    app.emit(TalentService(app.backend).get_talent(talent_id))


@talents.command(
    examples="""\
  popmelt talents query -w type=designer
  popmelt talents query -w keywords=vibrant
  popmelt talents query -w description=maya -w type=designer"""
)
@click.option(
    "-w",
    "--where",
    "where",
    multiple=True,
    metavar="FIELD=VALUE",
    help="Criterion; repeat to AND several together.",
)
@click.pass_obj
def query(app: AppContext, where: tuple[str, ...]) -> None:
    """Find talents matching every criterion."""
    criteria = parse_pairs(where, option="--where")
    app.emit(TalentService(app.backend).query_talents(criteria))
