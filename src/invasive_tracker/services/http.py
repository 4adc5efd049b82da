"""
Shared HTTP transport for the table service.

Provides a pre-configured ``requests.Session`` and ``RequestsTransport``, the
object the request layer hands every call to.  The session never retries:
a failed call surfaces to the caller on the first attempt.

Usage::

    from invasive_tracker.services.http import RequestsTransport

    transport = RequestsTransport()
    resp = transport.call("https://tracker.example.org/tables/users", method="GET")
"""

from __future__ import annotations

from typing import Any, Protocol

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from invasive_tracker.errors import TransportError

#: Failures are reported to the caller as-is, so nothing is retried here.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = "invasive-species-tracker/0.1"


class Response(Protocol):
    """What the request layer needs from a transport response."""

    status_code: int

    def json(self) -> Any: ...


class Transport(Protocol):
    """Anything that can perform one HTTP call."""

    def call(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> Response: ...


def create_session(retry: Retry | None = None) -> requests.Session:
    """
    Build a ``requests.Session`` for the table service.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``, no retries).
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("http://", "https://"):
        s.mount(prefix, adapter)
    s.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return s


class RequestsTransport:
    """Transport backed by a ``requests.Session``.

    Every call carries ``timeout``; there is no per-call override.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session or create_session()
        self.timeout = timeout

    def call(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> requests.Response:
        """Send one request; connection-level failures become ``TransportError``."""
        try:
            return self.session.request(
                method, url, headers=headers, data=body, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
