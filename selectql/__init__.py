"""selectQL – dialect-aware, parameterized SELECT statement builder.

Build the statement, bind the values, hand both to your driver.

Public API
----------
``QueryBuilder``
    Fluent builder: columns, joins, filters, grouping, ordering and
    pagination in, ``(sql, args)`` out.

``build_from_plan``
    Parse a JSON ``SelectPlan`` and compile it for a dialect.

Re-exported types
-----------------
``Dialect``, ``SQLDialect``, ``DialectFactory``, ``CompiledSQL``,
``SelectPlan`` and its parts, and all error classes.

Extensibility
-------------
New dialects can be registered via::

    from selectql.dialect.registry import DialectFactory

    @DialectFactory.register("cockroach")
    class CockroachDialect(PostgresDialect):
        ...

After registration, ``QueryBuilder("cockroach", ...)`` picks it up
automatically.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from selectql.compile.base import CompiledSQL
from selectql.compile.builder import QueryBuilder
from selectql.dialect import (
    Dialect,
    DialectFactory,
    DialectLike,
    MariaDBDialect,
    PlaceholderStyle,
    PostgresDialect,
    SQLDialect,
)
from selectql.errors import ParseError, SelectQLError, UnsupportedDialectError
from selectql.schema.converters import (
    sortable_columns_from_engine,
    sortable_columns_from_sqlalchemy,
)
from selectql.schema.plan import (
    AggregateSpec,
    BetweenSpec,
    ConditionSpec,
    InSpec,
    JoinSpec,
    OrderSpec,
    SelectPlan,
)

logging.getLogger("selectql").addHandler(logging.NullHandler())

__all__ = [
    # Core
    "QueryBuilder",
    "build_from_plan",
    "CompiledSQL",
    # Dialects
    "Dialect",
    "DialectFactory",
    "DialectLike",
    "MariaDBDialect",
    "PlaceholderStyle",
    "PostgresDialect",
    "SQLDialect",
    # Plans
    "SelectPlan",
    "AggregateSpec",
    "JoinSpec",
    "ConditionSpec",
    "InSpec",
    "BetweenSpec",
    "OrderSpec",
    # Converters
    "sortable_columns_from_sqlalchemy",
    "sortable_columns_from_engine",
    # Errors
    "SelectQLError",
    "UnsupportedDialectError",
    "ParseError",
]


def build_from_plan(plan_json: str, dialect: DialectLike) -> CompiledSQL:
    """Parse a JSON SelectPlan and compile it for ``dialect``.

    Example::

        compiled = selectql.build_from_plan(config_json, "mariadb")
        cursor.execute(compiled.sql, compiled.params)

    Args:
        plan_json: JSON object matching :class:`SelectPlan`.
        dialect: Dialect tag or instance.

    Returns:
        ``CompiledSQL`` with ``sql``, ``params`` and ``dialect``.

    Raises:
        ParseError: If ``plan_json`` is not valid JSON or not a valid plan.
        UnsupportedDialectError: If ``dialect`` is not registered.
    """
    try:
        raw = json.loads(plan_json)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}", raw=plan_json) from exc

    try:
        plan = SelectPlan.model_validate(raw)
    except ValidationError as exc:
        raise ParseError(f"SelectPlan structure is invalid: {exc}", raw=plan_json) from exc

    return QueryBuilder.from_plan(plan, dialect).compile()
