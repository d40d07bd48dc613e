"""Final statement assembly.

``StatementAssembler`` reads a :class:`~selectql.compile.state.BuilderState`
and concatenates its fragments in a fixed clause order::

    SELECT [DISTINCT] <columns> FROM <table>
    [<joins>] [WHERE ...] [GROUP BY ...] [HAVING ...]
    [ORDER BY ...] [LIMIT <p>] [OFFSET <p>]

Assembly never mutates the state.  LIMIT and OFFSET values are appended to a
fresh copy of the argument list, so calling ``build()`` twice returns the
same statement and the same arguments.
"""
from __future__ import annotations

import logging
from typing import Any

from selectql.compile.helpers import generate_placeholders
from selectql.compile.state import BuilderState
from selectql.dialect.base import PlaceholderStyle, SQLDialect

logger = logging.getLogger("selectql")


class StatementAssembler:
    """Renders accumulated builder state to ``(sql, args)``.

    Args:
        dialect: Dialect used for the LIMIT / OFFSET placeholders and for
            deciding the order of the returned arguments.
    """

    def __init__(self, dialect: SQLDialect) -> None:
        self._dialect = dialect

    def assemble(self, state: BuilderState) -> tuple[str, list[Any]]:
        """Render ``state`` to statement text and its bound arguments."""
        args = self._bound_args(state)
        parts: list[str] = [self._select_clause(state), f"FROM {state.table}"]

        if state.joins:
            parts.append(" ".join(state.joins))

        if state.conditions:
            parts.append(f"WHERE {' AND '.join(state.conditions)}")

        if state.group_by:
            parts.append(f"GROUP BY {', '.join(state.group_by)}")

        if state.having:
            parts.append(f"HAVING {' AND '.join(state.having)}")

        if state.order_by:
            parts.append(f"ORDER BY {state.order_by}")

        for keyword, value in (("LIMIT", state.limit), ("OFFSET", state.offset)):
            if value > 0:
                placeholder = generate_placeholders(self._dialect, len(args) + 1, 1)
                parts.append(f"{keyword} {placeholder}")
                args.append(value)

        sql = " ".join(parts)
        logger.debug("Assembled %s statement: %s", self._dialect.dialect_name, sql)
        return sql, args

    @staticmethod
    def _select_clause(state: BuilderState) -> str:
        prefix = "SELECT DISTINCT" if state.distinct else "SELECT"
        return f"{prefix} {', '.join(state.columns)}"

    def _bound_args(self, state: BuilderState) -> list[Any]:
        # `?` binds by textual position: every WHERE value precedes every
        # HAVING value, whatever order the calls were made in.
        if self._dialect.placeholder_style is PlaceholderStyle.QMARK:
            return [*state.where_args, *state.having_args]
        return list(state.args)
