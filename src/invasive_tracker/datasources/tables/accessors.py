"""Per-collection accessors for the table service.

Each table gets the same four operations (``list``, ``get``, ``create``,
``update``) with its own path, update semantics and creation defaults.
Creation defaults are applied by pure ``stamp_*`` functions that return a
new record; the caller's dict is never touched.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from invasive_tracker.datasources.tables import client
from invasive_tracker.dates import now_iso

if TYPE_CHECKING:
    from invasive_tracker.datasources.tables.client import TableClient
    from invasive_tracker.datasources.tables.models import CollectionResponse, Record

# =============================================================================
# Creation defaults
# =============================================================================


def stamp_report(data: Record, now: datetime | None = None) -> Record:
    """Copy of a sighting report with ``report_date`` set to now."""
    return {**data, "report_date": now_iso(now)}


def stamp_user(data: Record, now: datetime | None = None) -> Record:
    """Copy of a user with registration/login timestamps and zeroed counters."""
    stamp = now_iso(now)
    return {
        **data,
        "registration_date": stamp,
        "last_login": stamp,
        "reports_submitted": 0,
        "reports_verified": 0,
        "active_status": True,
    }


# =============================================================================
# Accessors
# =============================================================================


class Table:
    """CRUD over one collection."""

    name: str = ""
    update_method: str = "PUT"  # full replace

    def __init__(self, api: TableClient) -> None:
        self.api = api

    def prepare(self, data: Record) -> Record:
        """Record to send on create. Subclasses add their defaults."""
        return dict(data)

    def list(self, params: dict[str, Any] | None = None) -> CollectionResponse:
        """GET tables/<name> with filter/sort/pagination params passed through."""
        return self.api.list_records(self.name, params)

    def get(self, record_id: str | int) -> Record:
        """GET tables/<name>/<id>."""
        return self.api.request(client.table_endpoint(self.name, record_id))

    def create(self, data: Record) -> Record:
        """POST tables/<name>."""
        return self.api.request(
            client.table_endpoint(self.name), method="POST", body=self.prepare(data)
        )

    def update(self, record_id: str | int, data: Record) -> Record:
        """PUT (full replace) or PATCH (partial) tables/<name>/<id>."""
        return self.api.request(
            client.table_endpoint(self.name, record_id), method=self.update_method, body=data
        )


class SpeciesTable(Table):
    name = client.SPECIES

    def search(self, query: str) -> CollectionResponse:
        """Free-text species search, first 20 matches."""
        return self.list({"search": query, "limit": 20})


class ReportTable(Table):
    name = client.REPORTS
    update_method = "PATCH"

    def prepare(self, data: Record) -> Record:
        return stamp_report(data)

    def verify(self, record_id: str | int, verifier_name: str, status: str) -> Record:
        """Set a report's verification status and who verified it."""
        return self.update(record_id, {"verification_status": status, "verified_by": verifier_name})

    def by_threat_level(self, threat_level: str) -> CollectionResponse:
        return self.list({"search": threat_level, "limit": 100})

    def recent(self, limit: int = 10) -> CollectionResponse:
        return self.list({"limit": limit, "sort": "created_at"})


class LocationTable(Table):
    name = client.LOCATIONS


class UserTable(Table):
    name = client.USERS
    update_method = "PATCH"

    def prepare(self, data: Record) -> Record:
        return stamp_user(data)
