"""Category distributions over species and sighting report records."""

from __future__ import annotations

from collections import Counter
from typing import Any

from invasive_tracker.schemas import UNKNOWN, HabitatCategory

# Checked top to bottom against the lower-cased description; first hit wins.
HABITAT_RULES: tuple[tuple[HabitatCategory, tuple[str, ...]], ...] = (
    (HabitatCategory.FOREST, ("forest",)),
    (HabitatCategory.WETLAND, ("wetland", "pond", "marsh")),
    (HabitatCategory.GRASSLAND, ("grassland", "field")),
    (HabitatCategory.COASTAL, ("coastal", "dune")),
    (HabitatCategory.RIPARIAN, ("riparian", "stream", "river")),
    (HabitatCategory.URBAN, ("urban", "road", "parking")),
    (HabitatCategory.AGRICULTURAL, ("agricultural", "crop", "farm")),
)


def _field_or_unknown(record: Any, name: str) -> str:
    value = record.get(name) if isinstance(record, dict) else None
    return str(value) if value else UNKNOWN


def threat_level_distribution(species: list[dict[str, Any]]) -> dict[str, int]:
    """
    Count species per ``threat_level``.

    Missing or empty threat levels count as ``"Unknown"``.  Keys appear in
    the order they are first seen.
    """
    return dict(Counter(_field_or_unknown(s, "threat_level") for s in species))


def classify_habitat(description: Any) -> HabitatCategory:
    """Map a free-text habitat description to its category (``Other`` if none match)."""
    if not description:
        return HabitatCategory.OTHER
    text = str(description).casefold()
    for category, keywords in HABITAT_RULES:
        if any(word in text for word in keywords):
            return category
    return HabitatCategory.OTHER


def habitat_distribution(reports: list[dict[str, Any]]) -> dict[str, int]:
    """Count reports per habitat category derived from ``habitat_description``."""
    counts: Counter[str] = Counter()
    for report in reports:
        description = report.get("habitat_description") if isinstance(report, dict) else None
        counts[classify_habitat(description).value] += 1
    return dict(counts)


def verification_distribution(reports: list[dict[str, Any]]) -> dict[str, int]:
    """Count reports per ``verification_status`` (``"Unknown"`` when absent)."""
    return dict(Counter(_field_or_unknown(r, "verification_status") for r in reports))
