"""Stylesheet fragments for UI components.

``button``, ``card`` and ``input`` have hand-authored fragments covering the
base rule and its pseudo-states. The remaining components get a placeholder
comment. The talent and custom properties are accepted for every component
but do not influence the output yet.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from popmelt.domain.talent import Talent
from popmelt.domain.types import ComponentKind, VisualState

CustomProperties = Mapping[str, str | int | float]

_BUTTON_CSS = """\
.button {
  display: inline-flex;
  align-items: center;
  justify-content: center;
  cursor: pointer;
  font-weight: 500;
  text-decoration: none;
  border: none;
  outline: none;
  padding: 0.5rem 1rem;
  border-radius: 0.25rem;
  background-color: #4a90e2;
  color: white;
  transition: all 0.2s ease;
}

.button:hover {
  background-color: #357ab8;
}

.button:active {
  transform: translateY(1px);
}

.button:focus {
  box-shadow: 0 0 0 3px rgba(74, 144, 226, 0.3);
}

.button:disabled {
  opacity: 0.6;
  cursor: not-allowed;
}"""

_CARD_CSS = """\
.card {
  background-color: #fff;
  border-radius: 8px;
  box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
  padding: 16px;
  transition: all 0.2s ease;
}

.card:hover {
  box-shadow: 0 4px 12px rgba(0, 0, 0, 0.15);
}"""

_INPUT_CSS = """\
.input {
  display: block;
  width: 100%;
  padding: 8px 12px;
  border: 1px solid #ccc;
  border-radius: 4px;
  background-color: #fff;
  transition: all 0.2s ease;
}

.input:focus {
  border-color: #4a90e2;
  box-shadow: 0 0 0 3px rgba(74, 144, 226, 0.3);
  outline: none;
}

.input:disabled {
  background-color: #f5f5f5;
  cursor: not-allowed;
}"""


def button_css(
    talent: Talent,
    state: VisualState,
    custom_properties: CustomProperties | None = None,
) -> str:
    return _BUTTON_CSS


def card_css(
    talent: Talent,
    state: VisualState,
    custom_properties: CustomProperties | None = None,
) -> str:
    return _CARD_CSS


def input_css(
    talent: Talent,
    state: VisualState,
    custom_properties: CustomProperties | None = None,
) -> str:
    return _INPUT_CSS


def placeholder_css(component: ComponentKind) -> str:
    return f"/* CSS for {component.value} component */"


_RENDERERS: dict[ComponentKind, Callable[[Talent, VisualState, CustomProperties | None], str]] = {
    ComponentKind.BUTTON: button_css,
    ComponentKind.CARD: card_css,
    ComponentKind.INPUT: input_css,
}


def render_stylesheet(
    talent: Talent,
    component: ComponentKind | str,
    state: VisualState | str = VisualState.DEFAULT,
    custom_properties: CustomProperties | None = None,
) -> str:
    """Return the stylesheet fragment for *component* in *state*.

    Raises ValueError if *component* or *state* is not a known value.
    """
    kind = ComponentKind(component)
    visual_state = VisualState(state)
    renderer = _RENDERERS.get(kind)
    if renderer is None:
        return placeholder_css(kind)
    return renderer(talent, visual_state, custom_properties)
