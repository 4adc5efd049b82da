"""Dashboard summary across all four tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from invasive_tracker.schemas import ACTIVE_STATUSES

if TYPE_CHECKING:
    from invasive_tracker.api import TrackerAPI

logger = logging.getLogger(__name__)

#: Page size used to pull "everything" for the summary.
STATS_LIMIT = 1000


@dataclass
class SpeciesStats:
    """Headline counts plus the records they were computed from."""

    total_species: int
    active_reports: int
    total_reports: int
    monitoring_sites: int
    contributors: int
    species: list[dict[str, Any]] = field(default_factory=list)
    reports: list[dict[str, Any]] = field(default_factory=list)
    locations: list[dict[str, Any]] = field(default_factory=list)
    users: list[dict[str, Any]] = field(default_factory=list)


def count_active(reports: list[dict[str, Any]]) -> int:
    """Reports whose status is exactly ``Pending`` or ``Verified``.

    Non-string statuses never match.
    """
    active = 0
    for report in reports:
        status = report.get("verification_status") if isinstance(report, dict) else None
        if isinstance(status, str) and status in ACTIVE_STATUSES:
            active += 1
    return active


def get_species_stats(api: TrackerAPI) -> SpeciesStats:
    """
    Fetch up to 1000 records from each table and summarize them.

    Totals prefer the service's declared ``total`` and fall back to the number
    of records returned.  The four fetches are independent of each other; any
    failure aborts the whole summary.
    """
    params = {"limit": STATS_LIMIT}
    species = api.species.list(params)
    reports = api.reports.list(params)
    locations = api.locations.list(params)
    users = api.users.list(params)

    stats = SpeciesStats(
        total_species=species.count,
        active_reports=count_active(reports.data),
        total_reports=reports.count,
        monitoring_sites=locations.count,
        contributors=users.count,
        species=list(species.data),
        reports=list(reports.data),
        locations=list(locations.data),
        users=list(users.data),
    )
    logger.debug(
        "Stats: %d species, %d reports (%d active), %d sites, %d contributors",
        stats.total_species,
        stats.total_reports,
        stats.active_reports,
        stats.monitoring_sites,
        stats.contributors,
    )
    return stats
