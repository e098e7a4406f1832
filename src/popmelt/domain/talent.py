"""Talent profile model.

A talent record has a fixed, typed core and an open tail: any key the store
returns that is not part of the core is kept in :attr:`Talent.extra` and merged
back at the top level when the record is serialized.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Keys the store assigns on create; never sent on insert.
STORE_ASSIGNED_KEYS: frozenset[str] = frozenset({"id", "created_at", "updated_at"})

DESIGN_SYSTEM_KEY = "design-system"


class Aesthetic(BaseModel):
    """Free-text aesthetic description plus ordered keywords."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    keywords: list[str] = Field(default_factory=list)


class Talent(BaseModel):
    """One talent profile.

    Attributes:
        id: Unique, immutable identifier.
        aesthetic: Description and keywords used for keyword queries.
        design_system: Open mapping stored under the ``design-system`` key.
        created_at: ISO-8601 timestamp assigned by the store.
        updated_at: ISO-8601 timestamp refreshed by the store on update.
        extra: Fields outside the typed core, keyed by their wire name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str = ""
    description: str = ""
    type: str = ""
    aesthetic: Aesthetic = Field(default_factory=Aesthetic)
    title: str | None = None
    summary: str | None = None
    photo: str | None = None
    design_system: dict[str, Any] | None = Field(default=None, alias=DESIGN_SYSTEM_KEY)
    created_at: str | None = None
    updated_at: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Talent:
        """Build a Talent from a wire record, splitting unknown keys into ``extra``."""
        core = {k: v for k, v in record.items() if k in CORE_KEYS}
        extra = {k: v for k, v in record.items() if k not in CORE_KEYS}
        if extra:
            core["extra"] = extra
        return cls.model_validate(core)

    def to_record(self) -> dict[str, Any]:
        """Serialize back to the flat wire shape.

        Only fields that were actually provided are emitted. Core fields win
        over an ``extra`` key of the same name.
        """
        core = self.model_dump(
            mode="json",
            by_alias=True,
            exclude={"extra"},
            exclude_unset=True,
        )
        return {**self.extra, **core}

    def summary_record(self) -> dict[str, Any]:
        """Short listing form: ``{id, name, type}``."""
        return {"id": self.id, "name": self.name, "type": self.type}


def _core_keys() -> frozenset[str]:
    keys: set[str] = set()
    for name, info in Talent.model_fields.items():
        if name == "extra":
            continue
        keys.add(info.alias or name)
    return frozenset(keys)


CORE_KEYS: frozenset[str] = _core_keys()


def insertable(record: Mapping[str, Any]) -> dict[str, Any]:
    """Drop store-assigned keys from a record before insert."""
    return {k: v for k, v in record.items() if k not in STORE_ASSIGNED_KEYS}
