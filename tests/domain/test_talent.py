"""Tests for the Talent model and its wire shape."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from popmelt.domain.samples import SAMPLE_TALENTS
from popmelt.domain.talent import CORE_KEYS, Aesthetic, Talent, insertable


def _record(**overrides):
    record = {
        "id": "nina-park",
        "name": "Nina Park",
        "description": "Profile for Nina Park",
        "type": "illustrator",
        "aesthetic": {"description": "Soft pastels", "keywords": ["soft", "pastel"]},
        "created_at": "2025-03-21T21:49:43.000Z",
        "updated_at": "2025-03-21T21:49:43.000Z",
    }
    record.update(overrides)
    return record


class TestFromRecord:
    def test_core_fields(self) -> None:
        talent = Talent.from_record(_record())
        assert talent.id == "nina-park"
        assert talent.type == "illustrator"
        assert talent.aesthetic.keywords == ["soft", "pastel"]
        assert talent.extra == {}

    def test_unknown_keys_go_to_extra(self) -> None:
        talent = Talent.from_record(_record(portfolio_url="https://nina.example", rate=120))
        assert talent.extra == {"portfolio_url": "https://nina.example", "rate": 120}

    def test_design_system_alias(self) -> None:
        talent = Talent.from_record(_record(**{"design-system": {"radius": "4px"}}))
        assert talent.design_system == {"radius": "4px"}
        assert "design-system" not in talent.extra

    def test_missing_id_rejected(self) -> None:
        record = _record()
        del record["id"]
        with pytest.raises(ValidationError):
            Talent.from_record(record)

    def test_frozen(self) -> None:
        talent = Talent.from_record(_record())
        with pytest.raises(ValidationError):
            talent.name = "Other"  # type: ignore[misc]


class TestToRecord:
    def test_round_trips_extra_at_top_level(self) -> None:
        record = _record(portfolio_url="https://nina.example", **{"design-system": {"a": 1}})
        assert Talent.from_record(record).to_record() == record

    def test_unset_optionals_omitted(self) -> None:
        out = Talent.from_record(_record()).to_record()
        assert "title" not in out
        assert "photo" not in out
        assert "extra" not in out

    def test_explicit_null_kept(self) -> None:
        out = Talent.from_record(_record(title=None)).to_record()
        assert out["title"] is None

    def test_core_wins_over_extra(self) -> None:
        talent = Talent(id="a", name="Core", extra={"name": "Extra", "note": "x"})
        out = talent.to_record()
        assert out["name"] == "Core"
        assert out["note"] == "x"

    def test_serialization_is_stable(self) -> None:
        talent = SAMPLE_TALENTS[0]
        assert json.dumps(talent.to_record()) == json.dumps(talent.to_record())


class TestHelpers:
    def test_summary_record(self) -> None:
        assert SAMPLE_TALENTS[1].summary_record() == {
            "id": "olivia-gray",
            "name": "Olivia Gray",
            "type": "designer",
        }

    def test_insertable_drops_store_assigned_keys(self) -> None:
        payload = insertable(_record())
        assert "id" not in payload
        assert "created_at" not in payload
        assert "updated_at" not in payload
        assert payload["name"] == "Nina Park"

    def test_core_keys_use_wire_names(self) -> None:
        assert "design-system" in CORE_KEYS
        assert "design_system" not in CORE_KEYS
        assert "extra" not in CORE_KEYS

    def test_aesthetic_defaults(self) -> None:
        assert Aesthetic().keywords == []


class TestSamples:
    def test_two_designers(self) -> None:
        assert [t.id for t in SAMPLE_TALENTS] == ["maya-chen", "olivia-gray"]
        assert all(t.type == "designer" for t in SAMPLE_TALENTS)

    def test_ids_unique(self) -> None:
        ids = [t.id for t in SAMPLE_TALENTS]
        assert len(ids) == len(set(ids))
