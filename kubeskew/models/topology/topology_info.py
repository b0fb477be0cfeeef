"""Topology skew result models.

A ``TopologyRow`` is one failure domain with its pod count and skew. A
``TopologyTable`` groups the rows of one workload, and ``TopologyTables`` is
the ordered, deduplicated result set handed to the renderers.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TopologyRow(BaseModel):
    """Pod count and skew for a single domain."""

    model_config = ConfigDict(frozen=True)

    key: str
    count: int = Field(ge=0)
    skew: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.key} => count: {self.count} skew: {self.skew}"


class TopologyTable(BaseModel):
    """Rows for one workload, ordered by domain key."""

    model_config = ConfigDict(frozen=True)

    header: str | None = None
    rows: tuple[TopologyRow, ...] = ()

    def sort_key(self) -> tuple[bool, str, tuple[tuple[str, int, int], ...]]:
        """Composite ordering: headerless tables first, then header, then rows."""
        return (
            self.header is not None,
            self.header or "",
            tuple((row.key, row.count, row.skew) for row in self.rows),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the serialized shape, omitting an absent header."""
        return self.model_dump(exclude_none=True, mode="json")


class TopologyTables:
    """Ordered set of topology tables.

    Two tables are duplicates only when the header and every row are equal.
    Members are kept sorted by ``TopologyTable.sort_key``.
    """

    def __init__(self, tables: Iterable[TopologyTable] = ()) -> None:
        self._tables: list[TopologyTable] = []
        for table in tables:
            self.insert(table)

    def insert(self, table: TopologyTable) -> bool:
        """Insert ``table`` unless an equal table is already present.

        Returns:
            True when the table was added.
        """
        if table in self._tables:
            return False
        bisect.insort(self._tables, table, key=TopologyTable.sort_key)
        return True

    def is_empty(self) -> bool:
        return not self._tables

    def has_header(self) -> bool:
        return any(table.header is not None for table in self._tables)

    def to_list(self) -> list[dict[str, Any]]:
        return [table.to_dict() for table in self._tables]

    def __iter__(self) -> Iterator[TopologyTable]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopologyTables):
            return NotImplemented
        return self._tables == other._tables

    def __repr__(self) -> str:
        return f"TopologyTables({self._tables!r})"
