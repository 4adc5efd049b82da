"""Shared fixtures: an in-memory transport standing in for the table service."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from invasive_tracker.api import TrackerAPI

BASE_URL = "http://tracker.test"


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(
        self, status_code: int = 200, payload: Any = None, *, invalid: bool = False
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.invalid = invalid

    def json(self) -> Any:
        if self.invalid:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


@dataclass
class Call:
    url: str
    method: str
    headers: dict[str, str]
    body: str | None

    @property
    def path(self) -> str:
        return self.url.removeprefix(BASE_URL + "/")

    @property
    def json_body(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


@dataclass
class FakeTransport:
    """Returns canned responses keyed by (method, path-with-query)."""

    routes: dict[tuple[str, str], FakeResponse] = field(default_factory=dict)
    calls: list[Call] = field(default_factory=list)

    def respond(self, method: str, path: str, payload: Any = None, status: int = 200) -> None:
        self.routes[(method, path)] = FakeResponse(status, payload)

    def call(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: str | None = None,
    ) -> FakeResponse:
        call = Call(url=url, method=method, headers=headers or {}, body=body)
        self.calls.append(call)
        return self.routes.get((method, call.path), FakeResponse(404))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def api(transport: FakeTransport) -> TrackerAPI:
    return TrackerAPI(base_url=BASE_URL, transport=transport)
