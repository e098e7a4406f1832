"""Built-in talent profiles served when no store is configured or reachable."""

from __future__ import annotations

from popmelt.domain.talent import Aesthetic, Talent

_SEEDED_AT = "2025-03-21T21:49:43.000Z"

SAMPLE_TALENTS: tuple[Talent, ...] = (
    Talent(
        id="maya-chen",
        name="Maya Chen",
        description="Profile for Maya Chen",
        type="designer",
        aesthetic=Aesthetic(
            description=(
                "Vibrant and playful with high-energy colors, bold contrasts, "
                "and dynamic animations for an engaging digital experience."
            ),
            keywords=["vibrant", "playful", "energetic", "bold", "expressive", "engaging"],
        ),
        created_at=_SEEDED_AT,
        updated_at=_SEEDED_AT,
    ),
    Talent(
        id="olivia-gray",
        name="Olivia Gray",
        description="Profile for Olivia Gray",
        type="designer",
        aesthetic=Aesthetic(
            description=(
                "Modern and refined with subtle contrasts, cooler tones, and slightly "
                "faster animations for a contemporary digital experience."
            ),
            keywords=["modern", "refined", "cool", "subtle", "sophisticated", "contemporary"],
        ),
        created_at=_SEEDED_AT,
        updated_at=_SEEDED_AT,
    ),
)
