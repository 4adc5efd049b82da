"""
Request layer for the RESTful table service.

Builds ``tables/<name>[/<id>]`` endpoints and query strings, hands the call to
the transport, and turns the response into a decoded body:

- status outside 200-299 raises ``RequestFailed`` carrying the status
- 204 No Content returns ``None`` without decoding
- every failure is logged here, then re-raised unchanged
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from invasive_tracker.config import get_settings
from invasive_tracker.datasources.tables.models import normalize_collection
from invasive_tracker.errors import RequestFailed, TransportError
from invasive_tracker.services.http import RequestsTransport

if TYPE_CHECKING:
    from invasive_tracker.datasources.tables.models import CollectionResponse
    from invasive_tracker.services.http import Transport

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Table names
# ---------------------------------------------------------------------------
SPECIES = "invasive_species"
REPORTS = "sighting_reports"
LOCATIONS = "monitoring_locations"
USERS = "users"

JSON_HEADERS = {"Content-Type": "application/json"}
NO_CONTENT = 204


def query_string(params: dict[str, Any] | None) -> str:
    """
    URL-encode ``params`` as ``key=value`` pairs.

    Keys are passed through verbatim.  ``None`` values are skipped and
    booleans are written the way JSON spells them.  Returns ``""`` when
    nothing is left to encode.
    """
    if not params:
        return ""
    pairs: list[tuple[str, Any]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        pairs.append((key, value))
    return urlencode(pairs)


def table_endpoint(
    table: str,
    record_id: str | int | None = None,
    params: dict[str, Any] | None = None,
) -> str:
    """Path for a table or one of its records, with an optional query suffix."""
    endpoint = f"tables/{table}"
    if record_id is not None:
        endpoint = f"{endpoint}/{record_id}"
    query = query_string(params)
    return f"{endpoint}?{query}" if query else endpoint


class TableClient:
    """Sends requests to the table service and decodes the responses."""

    def __init__(self, base_url: str | None = None, transport: Transport | None = None) -> None:
        settings = get_settings()
        self.base_url = settings.base_url if base_url is None else base_url
        self.transport = transport or RequestsTransport(timeout=settings.request_timeout)

    def url_for(self, endpoint: str) -> str:
        if not self.base_url:
            return endpoint
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """
        Perform one call and return the decoded JSON body.

        Args:
            endpoint: Path relative to ``base_url``, query string included.
            method: HTTP method.
            body: JSON-serializable payload, or None for no body.
            headers: Extra headers; these override the JSON content type.

        Returns:
            The decoded body, or None for a 204 response.

        Raises:
            RequestFailed: Non-2xx status.
            TransportError: Connection failure or undecodable body.
        """
        url = self.url_for(endpoint)
        merged = {**JSON_HEADERS, **(headers or {})}
        payload = json.dumps(body) if body is not None else None
        logger.debug("%s %s", method, url)
        try:
            resp = self.transport.call(url, method=method, headers=merged, body=payload)
            status = resp.status_code
            if not 200 <= status <= 299:
                raise RequestFailed(status, url)
            if status == NO_CONTENT:
                return None
            try:
                return resp.json()
            except ValueError as exc:
                raise TransportError(f"Could not decode response from {url}: {exc}") from exc
        except Exception as exc:
            logger.error("API request failed: %s", exc)
            raise

    def list_records(self, table: str, params: dict[str, Any] | None = None) -> CollectionResponse:
        """GET a table listing and normalize its shape."""
        return normalize_collection(self.request(table_endpoint(table, params=params)))
