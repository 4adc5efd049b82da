"""Remote data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Endpoint paths, request building, status handling
    ├── models.py         # Dataclasses for API responses
    └── {feature}.py      # Per-collection operations

``tables/`` is the only source today: the RESTful table service holding the
species, sighting report, monitoring location and user collections.
"""
