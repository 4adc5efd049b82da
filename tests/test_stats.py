"""
Tests for the dashboard summary.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from invasive_tracker.analysis.stats import SpeciesStats, count_active
from invasive_tracker.errors import RequestFailed

if TYPE_CHECKING:
    from invasive_tracker.api import TrackerAPI
    from tests.conftest import FakeTransport

SPECIES = "tables/invasive_species?limit=1000"
REPORTS = "tables/sighting_reports?limit=1000"
LOCATIONS = "tables/monitoring_locations?limit=1000"
USERS = "tables/users?limit=1000"


def _respond_all(
    transport: FakeTransport,
    *,
    species: Any = None,
    reports: Any = None,
    locations: Any = None,
    users: Any = None,
) -> None:
    """Serve each table listing; omitted tables return an empty bare array."""
    bodies = {SPECIES: species, REPORTS: reports, LOCATIONS: locations, USERS: users}
    for path, body in bodies.items():
        transport.respond("GET", path, [] if body is None else body)


class TestCountActive:
    """Exact-match active statuses."""

    def test_pending_and_verified_only(self) -> None:
        reports = [
            {"verification_status": "Pending"},
            {"verification_status": "Verified"},
            {"verification_status": "Rejected"},
            {"verification_status": "pending"},
            {},
        ]
        assert count_active(reports) == 2

    def test_malformed_status_not_counted(self) -> None:
        reports = [
            {"verification_status": ["Pending"]},
            {"verification_status": {"state": "Verified"}},
            {"verification_status": "Verified"},
        ]
        assert count_active(reports) == 1


class TestGetSpeciesStats:
    """Summary across all four tables."""

    def test_bare_array_counts(self, api: TrackerAPI, transport: FakeTransport) -> None:
        _respond_all(transport, species=[{"id": i} for i in range(5)])
        stats = api.get_species_stats()
        assert stats.total_species == 5
        assert len(stats.species) == 5

    def test_declared_totals_preferred(self, api: TrackerAPI, transport: FakeTransport) -> None:
        _respond_all(
            transport,
            species={"data": [{"id": 1}], "total": 57},
            reports={
                "data": [
                    {"id": "r1", "verification_status": "Pending"},
                    {"id": "r2", "verification_status": "Verified"},
                    {"id": "r3", "verification_status": "Rejected"},
                ],
                "total": 1200,
            },
            locations={"data": [{"id": "l1"}, {"id": "l2"}]},
            users={"data": [], "total": 0},
        )

        stats = api.get_species_stats()

        assert stats == SpeciesStats(
            total_species=57,
            active_reports=2,
            total_reports=1200,
            monitoring_sites=2,
            contributors=0,
            species=[{"id": 1}],
            reports=[
                {"id": "r1", "verification_status": "Pending"},
                {"id": "r2", "verification_status": "Verified"},
                {"id": "r3", "verification_status": "Rejected"},
            ],
            locations=[{"id": "l1"}, {"id": "l2"}],
            users=[],
        )

    def test_active_reports_from_bare_array(
        self, api: TrackerAPI, transport: FakeTransport
    ) -> None:
        _respond_all(transport, reports=[{"verification_status": "Verified"}, {}])
        stats = api.get_species_stats()
        assert stats.active_reports == 1
        assert stats.total_reports == 2

    def test_empty_bodies(self, api: TrackerAPI, transport: FakeTransport) -> None:
        _respond_all(transport, species={}, reports={}, locations={}, users={})
        stats = api.get_species_stats()
        assert stats.total_species == 0
        assert stats.reports == []

    def test_fetches_each_table_once(self, api: TrackerAPI, transport: FakeTransport) -> None:
        _respond_all(transport)
        api.get_species_stats()
        assert sorted(c.path for c in transport.calls) == sorted(
            [SPECIES, REPORTS, LOCATIONS, USERS]
        )

    def test_malformed_status_does_not_abort(
        self, api: TrackerAPI, transport: FakeTransport
    ) -> None:
        _respond_all(
            transport,
            reports=[{"verification_status": ["Pending"]}, {"verification_status": "Pending"}],
        )
        stats = api.get_species_stats()
        assert stats.active_reports == 1
        assert stats.total_reports == 2

    def test_any_failure_aborts(self, api: TrackerAPI, transport: FakeTransport) -> None:
        _respond_all(transport)
        transport.respond("GET", LOCATIONS, status=500)
        with pytest.raises(RequestFailed) as excinfo:
            api.get_species_stats()
        assert excinfo.value.status == 500
