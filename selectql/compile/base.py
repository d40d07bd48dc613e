"""Compilation output: the ``CompiledSQL`` value object."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CompiledSQL:
    """The output of a finished builder.

    Attributes:
        sql: The statement text with dialect-specific placeholders.
        params: Bound values in placeholder order.
        dialect: The target dialect (``'postgres'`` or ``'mariadb'``).

    Unpacks like the ``(sql, params)`` pair returned by
    :meth:`~selectql.compile.builder.QueryBuilder.build`::

        sql, params = builder.compile()
        cursor.execute(sql, params)
    """

    sql: str
    params: list[Any] = field(default_factory=list)
    dialect: str = "postgres"

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield self.params
