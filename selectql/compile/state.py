"""Mutable clause state accumulated by a single ``QueryBuilder``."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BuilderState:
    """Fragments collected by builder calls, in call order.

    Identifiers are stored already quoted; condition and join fragments are
    stored with placeholders already rewritten for the dialect.

    Attributes:
        table: Quoted target table.
        columns: SELECT expressions (quoted columns or aggregate calls).
        joins: Complete ``... JOIN ... ON ...`` fragments.
        conditions: WHERE fragments, later joined with ``AND``.
        group_by: Quoted GROUP BY columns.
        having: HAVING fragments, later joined with ``AND``.
        order_by: The single ``<column> <direction>`` fragment, or ``""``.
        limit: LIMIT value; only values greater than zero are emitted.
        offset: OFFSET value; only values greater than zero are emitted.
        args: Every bound value in call order.  ``len(args) + 1`` is the
            index of the next numbered placeholder.
        where_args: The subset of ``args`` bound by WHERE fragments.
        having_args: The subset of ``args`` bound by HAVING fragments.
        distinct: Emit ``SELECT DISTINCT``.
    """

    table: str
    columns: list[str] = field(default_factory=list)
    joins: list[str] = field(default_factory=list)
    conditions: list[str] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    having: list[str] = field(default_factory=list)
    order_by: str = ""
    limit: int = 0
    offset: int = 0
    args: list[Any] = field(default_factory=list)
    where_args: list[Any] = field(default_factory=list)
    having_args: list[Any] = field(default_factory=list)
    distinct: bool = False

    @property
    def next_index(self) -> int:
        """1-based index of the next placeholder to allocate."""
        return len(self.args) + 1
