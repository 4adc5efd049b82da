"""Response shapes returned by the table service.

A collection listing comes back either as a paginated object
(``{"data": [...], "total": N}``) or as a bare JSON array.  Both are
normalized once, in ``normalize_collection``, into a tagged variant so the
rest of the package never re-checks the shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal

Record = dict[str, Any]

# =============================================================================
# Collection responses
# =============================================================================


@dataclass(frozen=True)
class Paginated:
    """A page of records plus the service's declared overall total."""

    kind: ClassVar[Literal["paginated"]] = "paginated"

    data: list[Record] = field(default_factory=list)
    total: int | None = None

    @property
    def count(self) -> int:
        """Declared total, falling back to the page length (0 or missing total)."""
        return self.total or len(self.data)


@dataclass(frozen=True)
class Raw:
    """A bare array of records with no pagination metadata."""

    kind: ClassVar[Literal["raw"]] = "raw"

    data: list[Record] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.data)


CollectionResponse = Paginated | Raw


def _as_total(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def _records(items: Any) -> list[Record]:
    if not isinstance(items, list):
        return []
    return [item for item in items if isinstance(item, dict)]


def normalize_collection(body: Any) -> CollectionResponse:
    """
    Turn a decoded listing body into ``Paginated`` or ``Raw``.

    Non-record array items are dropped.  Anything that is neither an object
    nor an array (including ``None`` from a 204) becomes an empty ``Raw``.
    """
    if isinstance(body, list):
        return Raw(data=_records(body))
    if isinstance(body, dict):
        return Paginated(data=_records(body.get("data")), total=_as_total(body.get("total")))
    return Raw()
