"""Invasive Species Tracker - client for the invasive species monitoring tables.

Architecture::

    services/      Shared HTTP transport (requests session, no retries)
    datasources/   Remote table service (request layer + per-table accessors)
    analysis/      Pure aggregation over fetched records (distributions, trends)
    session.py     Current-user holder with lookup-or-provision login
    api.py         Facade wiring the tables and the session together

Data flow: api → datasources/tables → services/http → remote service,
with fetched records optionally fed into analysis/.
"""

__version__ = "0.1.0"

from invasive_tracker.api import TrackerAPI
from invasive_tracker.config import Settings
from invasive_tracker.errors import RequestFailed, TrackerError, TransportError

__all__ = [
    "RequestFailed",
    "Settings",
    "TrackerAPI",
    "TrackerError",
    "TransportError",
    "__version__",
]
