"""
Facade over the table service.

Example::

    from invasive_tracker import TrackerAPI

    api = TrackerAPI()
    api.reports.verify("rep-1", "Dr. Rivera", "Verified")
    stats = api.get_species_stats()
    api.session.authenticate("sam@example.org", "Sam Lee", "Citizen Scientist")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from invasive_tracker.analysis.stats import SpeciesStats, get_species_stats
from invasive_tracker.datasources.tables import (
    LocationTable,
    ReportTable,
    SpeciesTable,
    TableClient,
    UserTable,
)
from invasive_tracker.session import UserSession

if TYPE_CHECKING:
    from invasive_tracker.services.http import Transport


class TrackerAPI:
    """One table client, the four accessors, and a user session."""

    def __init__(self, base_url: str | None = None, transport: Transport | None = None) -> None:
        self.client = TableClient(base_url=base_url, transport=transport)
        self.species = SpeciesTable(self.client)
        self.reports = ReportTable(self.client)
        self.locations = LocationTable(self.client)
        self.users = UserTable(self.client)
        self.session = UserSession(self.users)

    def get_species_stats(self) -> SpeciesStats:
        return get_species_stats(self)
