"""Exception types raised by the tracker client."""

from __future__ import annotations


class TrackerError(Exception):
    """Base class for all tracker client errors."""


class RequestFailed(TrackerError):
    """The remote service answered with a non-2xx status."""

    def __init__(self, status: int, url: str = "") -> None:
        self.status = status
        self.url = url
        super().__init__(f"HTTP error! status: {status}")


class TransportError(TrackerError):
    """The request never produced a usable response (network or decoding failure)."""
