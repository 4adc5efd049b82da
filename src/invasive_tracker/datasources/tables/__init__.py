"""Invasive species table service.

Public API:
  - client: TableClient (request layer), table names, endpoint helpers
  - models: Paginated / Raw collection responses, normalize_collection
  - accessors: SpeciesTable, ReportTable, LocationTable, UserTable
"""

from invasive_tracker.datasources.tables.accessors import (
    LocationTable,
    ReportTable,
    SpeciesTable,
    Table,
    UserTable,
    stamp_report,
    stamp_user,
)
from invasive_tracker.datasources.tables.client import TableClient, query_string, table_endpoint
from invasive_tracker.datasources.tables.models import (
    CollectionResponse,
    Paginated,
    Raw,
    Record,
    normalize_collection,
)

__all__ = [
    "CollectionResponse",
    "LocationTable",
    "Paginated",
    "Raw",
    "Record",
    "ReportTable",
    "SpeciesTable",
    "Table",
    "TableClient",
    "UserTable",
    "normalize_collection",
    "query_string",
    "stamp_report",
    "stamp_user",
    "table_endpoint",
]
