"""css — generate a component stylesheet for a talent."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from popmelt.commands._base import PopCommand, parse_pairs
from popmelt.domain.types import ComponentKind, VisualState
from popmelt.services.styles import StyleService

if TYPE_CHECKING:
    from popmelt.commands._context import AppContext


@click.command(
    cls=PopCommand,
    examples="""\
  popmelt css maya-chen button
  popmelt css olivia-gray input --state focus
  popmelt --json css maya-chen card -p radius=8px""",
)
@click.argument("talent_id")
@click.argument("component", type=click.Choice([c.value for c in ComponentKind]))
@click.option(
    "--state",
    default=VisualState.DEFAULT.value,
    type=click.Choice([s.value for s in VisualState]),
    show_default=True,
    help="Visual state of the component.",
)
@click.option(
    "-p",
    "--prop",
    "props",
    multiple=True,
    metavar="NAME=VALUE",
    help="Custom property; repeatable.",
)
@click.pass_obj
def css(app: AppContext, talent_id: str, component: str, state: str, props: tuple[str, ...]) -> None:
    """Generate CSS for COMPONENT using TALENT_ID's profile."""
    custom_properties = parse_pairs(props, option="--prop") or None
    result = StyleService(app.backend).generate_css(
        talent_id, component, state=state, custom_properties=custom_properties
    )
    app.emit(result)
