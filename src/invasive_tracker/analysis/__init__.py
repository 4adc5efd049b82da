"""Aggregations over records already fetched from the table service.

Modules:
  - distributions: category -> count mappings (threat level, habitat, verification)
  - trends: fixed-width monthly time series
  - stats: dashboard summary, the one piece here that fetches

Everything except ``stats.get_species_stats`` is pure: no I/O, no state kept
between calls, and malformed records fall into a default bucket instead of
raising.
"""

from invasive_tracker.analysis.distributions import (
    HABITAT_RULES,
    classify_habitat,
    habitat_distribution,
    threat_level_distribution,
    verification_distribution,
)
from invasive_tracker.analysis.stats import SpeciesStats, get_species_stats
from invasive_tracker.analysis.trends import monthly_reports

__all__ = [
    "HABITAT_RULES",
    "SpeciesStats",
    "classify_habitat",
    "get_species_stats",
    "habitat_distribution",
    "monthly_reports",
    "threat_level_distribution",
    "verification_distribution",
]
