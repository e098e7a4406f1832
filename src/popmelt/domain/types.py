"""Enumerations shared across the domain and service layers."""

from __future__ import annotations

from enum import StrEnum


class ComponentKind(StrEnum):
    """UI components a stylesheet can be generated for."""

    BUTTON = "button"
    CARD = "card"
    INPUT = "input"
    NAVBAR = "navbar"
    MODAL = "modal"
    TABLE = "table"


class VisualState(StrEnum):
    """Interaction state requested for a component."""

    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    DISABLED = "disabled"
    FOCUS = "focus"


class FallbackPolicy(StrEnum):
    """What a read does when the store fails.

    ``dataset`` serves the sample talents instead; ``fail`` surfaces the error.
    """

    DATASET = "dataset"
    FAIL = "fail"


class Source(StrEnum):
    """Where a read was served from."""

    STORE = "store"
    FALLBACK = "fallback"
