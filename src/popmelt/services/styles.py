"""StyleService — stylesheet fragments for a talent and a UI component."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from popmelt.domain.stylesheets import render_stylesheet
from popmelt.domain.types import ComponentKind, FallbackPolicy, VisualState
from popmelt.services.base import BaseService
from popmelt.services.result import ServiceResult
from popmelt.services.talents import TalentService

if TYPE_CHECKING:
    from popmelt.infrastructure.backend import Backend

logger = logging.getLogger(__name__)


class StyleService(BaseService):
    """Generates CSS for a component on behalf of a talent."""

    def __init__(
        self,
        backend: Backend,
        *,
        fallback: FallbackPolicy | str | None = None,
    ) -> None:
        super().__init__(backend)
        self._talents = TalentService(backend, fallback=fallback)

    def generate_css(
        self,
        talent_id: str,
        component: ComponentKind | str,
        *,
        state: VisualState | str = VisualState.DEFAULT,
        custom_properties: Mapping[str, str | int | float] | None = None,
    ) -> ServiceResult:
        """CSS for *component* in *state*, resolved against *talent_id*.

        The talent must exist (NOT_FOUND otherwise) even though its profile
        does not yet shape the output.
        """
        op = "generate_css"
        try:
            kind = ComponentKind(component)
            visual_state = VisualState(state)
        except ValueError as exc:
            return ServiceResult.failure(
                op,
                "INVALID_ARGUMENT",
                str(exc),
                {"component": str(component), "state": str(state)},
            )

        logger.debug(
            "Generating CSS for %s (%s) using talent %s", kind.value, visual_state.value, talent_id
        )
        talent, lookup = self._talents.find_talent(talent_id)
        if talent is None:
            return lookup.model_copy(update={"op": op})

        css = render_stylesheet(talent, kind, visual_state, custom_properties)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "talent_id": talent_id,
                "component": kind.value,
                "state": visual_state.value,
                "css": css,
            },
            warnings=lookup.warnings,
            meta=lookup.meta,
        )
