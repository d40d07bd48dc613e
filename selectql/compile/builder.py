"""Fluent SELECT statement builder.

``QueryBuilder`` accumulates clause fragments through chained calls and
hands them to :class:`~selectql.compile.assembler.StatementAssembler` on
:meth:`QueryBuilder.build`.  Dialect-specific text (identifier quoting,
placeholder numbering) is delegated to the resolved
:class:`~selectql.dialect.base.SQLDialect` via the helpers in
:mod:`selectql.compile.helpers`.

Example::

    sql, args = (
        QueryBuilder("postgres", "users", "id", "name")
        .where("status = ?", "active")
        .where_in("role", ["admin", "owner"])
        .order_by("created_at", "asc", allowed_columns={"created_at": True})
        .limit(20)
        .build()
    )
    # SELECT "id", "name" FROM "users" WHERE status = $1
    #   AND "role" IN ($2, $3) ORDER BY "created_at" ASC LIMIT $4

Raw text passed as a condition, an ON clause, or an aggregate function name is
inserted verbatim.  It is never parsed or validated; keeping user input out of
it is the caller's job.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import TYPE_CHECKING, Any

from selectql.compile.assembler import StatementAssembler
from selectql.compile.base import CompiledSQL
from selectql.compile.helpers import (
    escape_identifier,
    generate_placeholders,
    replace_placeholders,
    validate_direction,
)
from selectql.compile.state import BuilderState
from selectql.dialect import DialectFactory, DialectLike, SQLDialect

if TYPE_CHECKING:
    from selectql.schema.plan import SelectPlan

#: Column forced into ORDER BY when the requested one is not allow-listed.
DEFAULT_SORT_COLUMN = "id"


class QueryBuilder:
    """Builds one parameterized SELECT statement.

    A builder is single-owner: every mutator changes it in place and
    returns ``self`` for chaining.  It is not safe to share between threads.

    Args:
        dialect: ``"postgres"``, ``"mariadb"`` (or ``"mysql"``), a
            :class:`~selectql.dialect.base.Dialect` member, or a dialect
            instance.
        table: Target table name; quoted for the dialect.
        *columns: Column names to select.  ``*`` is kept as-is; when no
            columns are given the selection defaults to ``*``.

    Raises:
        UnsupportedDialectError: If ``dialect`` is not registered.
    """

    def __init__(self, dialect: DialectLike, table: str, *columns: str) -> None:
        self._dialect = DialectFactory.create(dialect)
        safe_columns = [self._escape(col) for col in columns] or ["*"]
        self._state = BuilderState(table=self._escape(table), columns=safe_columns)

    @classmethod
    def from_plan(cls, plan: SelectPlan, dialect: DialectLike) -> QueryBuilder:
        """Create a builder by replaying a declarative :class:`SelectPlan`.

        Clauses are applied in a fixed order (aggregates, joins, WHERE
        conditions, IN lists, BETWEEN ranges, GROUP BY, HAVING, ORDER BY,
        LIMIT, OFFSET), so placeholder numbering follows that order.
        """
        qb = cls(dialect, plan.table, *plan.columns)
        if plan.distinct:
            qb.distinct()
        for agg in plan.aggregates:
            qb.aggregate(agg.function, agg.column)
        for join in plan.joins:
            qb._join(join.type, join.table, join.on)
        for cond in plan.where:
            qb.where(cond.condition, *cond.args)
        for spec in plan.where_in:
            qb.where_in(spec.column, spec.values)
        for spec in plan.where_between:
            qb.where_between(spec.column, spec.start, spec.end)
        if plan.group_by:
            qb.group_by(*plan.group_by)
        for cond in plan.having:
            qb.having(cond.condition, *cond.args)
        if plan.order_by is not None:
            order = plan.order_by
            qb.order_by(order.column, order.direction, order.allowed_columns)
        return qb.limit(plan.limit).offset(plan.offset)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def dialect(self) -> SQLDialect:
        """The resolved dialect this builder renders for."""
        return self._dialect

    @property
    def args(self) -> list[Any]:
        """A copy of the values bound so far, in call order."""
        return list(self._state.args)

    # ------------------------------------------------------------------
    # SELECT list
    # ------------------------------------------------------------------

    def distinct(self) -> QueryBuilder:
        """Emit ``SELECT DISTINCT``."""
        self._state.distinct = True
        return self

    def aggregate(self, function: str, column: str) -> QueryBuilder:
        """Append ``FUNCTION(column)`` to the selected columns.

        ``function`` is inserted verbatim, so ``COUNT`` with column ``*``
        renders ``COUNT(*)``.  It must never carry user input.
        """
        self._state.columns.append(f"{function}({self._escape(column)})")
        return self

    # ------------------------------------------------------------------
    # Joins
    # ------------------------------------------------------------------

    def left_join(self, table: str, on_condition: str) -> QueryBuilder:
        """Add ``LEFT JOIN table ON on_condition``."""
        return self._join("LEFT", table, on_condition)

    def inner_join(self, table: str, on_condition: str) -> QueryBuilder:
        """Add ``INNER JOIN table ON on_condition``."""
        return self._join("INNER", table, on_condition)

    def right_join(self, table: str, on_condition: str) -> QueryBuilder:
        """Add ``RIGHT JOIN table ON on_condition``."""
        return self._join("RIGHT", table, on_condition)

    def _join(self, join_type: str, table: str, on_condition: str) -> QueryBuilder:
        # ON text is raw and never bound; it normally compares columns.
        self._state.joins.append(f"{join_type} JOIN {self._escape(table)} ON {on_condition}")
        return self

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def where(self, condition: str, *args: Any) -> QueryBuilder:
        """Add a WHERE condition; write ``?`` for every bound value.

        Conditions are combined with ``AND``.  For numbered dialects each
        ``?`` becomes ``$n`` continuing from the values already bound.
        """
        state = self._state
        state.conditions.append(replace_placeholders(self._dialect, condition, state.next_index))
        self._bind(state.where_args, args)
        return self

    def where_in(self, column: str, values: Iterable[Any]) -> QueryBuilder:
        """Add ``column IN (...)`` with one placeholder per value."""
        state = self._state
        values = list(values)
        placeholders = generate_placeholders(self._dialect, state.next_index, len(values))
        state.conditions.append(f"{self._escape(column)} IN ({placeholders})")
        self._bind(state.where_args, values)
        return self

    def where_between(self, column: str, start: Any, end: Any) -> QueryBuilder:
        """Add ``column BETWEEN start AND end``; ``start`` is bound first."""
        state = self._state
        low = generate_placeholders(self._dialect, state.next_index, 1)
        high = generate_placeholders(self._dialect, state.next_index + 1, 1)
        state.conditions.append(f"{self._escape(column)} BETWEEN {low} AND {high}")
        self._bind(state.where_args, (start, end))
        return self

    # ------------------------------------------------------------------
    # Grouping, ordering, pagination
    # ------------------------------------------------------------------

    def group_by(self, *columns: str) -> QueryBuilder:
        """Append columns to the GROUP BY clause."""
        self._state.group_by.extend(self._escape(col) for col in columns)
        return self

    def having(self, condition: str, *args: Any) -> QueryBuilder:
        """Add a HAVING condition; same placeholder rules as :meth:`where`."""
        state = self._state
        state.having.append(replace_placeholders(self._dialect, condition, state.next_index))
        self._bind(state.having_args, args)
        return self

    def order_by(
        self,
        column: str,
        direction: str,
        allowed_columns: Collection[str] | None = None,
    ) -> QueryBuilder:
        """Set the ORDER BY clause, replacing any earlier one.

        Args:
            column: Column to sort by.  Often comes from a request parameter.
            direction: ``ASC`` or ``DESC`` in any case; anything else is
                treated as ``DESC``.
            allowed_columns: Optional allow-list (a mapping or set of column
                names).  When given and ``column`` is not in it, the sort
                falls back to ``id``.
        """
        if allowed_columns is not None and column not in allowed_columns:
            column = DEFAULT_SORT_COLUMN
        self._state.order_by = f"{self._escape(column)} {validate_direction(direction)}"
        return self

    def limit(self, limit: int) -> QueryBuilder:
        """Set LIMIT; zero or negative values leave the clause out."""
        self._state.limit = limit
        return self

    def offset(self, offset: int) -> QueryBuilder:
        """Set OFFSET; zero or negative values leave the clause out."""
        self._state.offset = offset
        return self

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def build(self) -> tuple[str, list[Any]]:
        """Assemble the statement.

        Returns:
            ``(sql, args)`` where ``args`` is a new list in placeholder
            order, ending with the LIMIT and OFFSET values when present.
        """
        return StatementAssembler(self._dialect).assemble(self._state)

    def compile(self) -> CompiledSQL:
        """Assemble the statement and tag it with the dialect name."""
        sql, params = self.build()
        return CompiledSQL(sql=sql, params=params, dialect=self._dialect.dialect_name)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _escape(self, name: str) -> str:
        return escape_identifier(self._dialect, name)

    def _bind(self, clause_args: list[Any], values: Iterable[Any]) -> None:
        values = list(values)
        self._state.args.extend(values)
        clause_args.extend(values)
