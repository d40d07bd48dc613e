"""Utilities for deriving ORDER BY allow-lists from SQLAlchemy metadata.

:meth:`~selectql.compile.builder.QueryBuilder.order_by` accepts an allow-list
so that a sort column taken from a request cannot inject SQL.  The helpers
here build that allow-list from a table definition instead of by hand.

Install the optional dependency before using this module::

    pip install "selectql[sqlalchemy]"

Example::

    from selectql.schema.converters import sortable_columns_from_sqlalchemy

    allowed = sortable_columns_from_sqlalchemy(User)
    qb.order_by(request.args["sort"], request.args["dir"], allowed)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy import Engine


def sortable_columns_from_sqlalchemy(
    table: Any,
    *,
    exclude: list[str] | None = None,
) -> dict[str, bool]:
    """Return an ORDER BY allow-list for a SQLAlchemy table.

    Args:
        table: A :class:`sqlalchemy.Table`, a declarative model class, or any
            object exposing ``__table__``.
        exclude: Column names to leave out (e.g. large text or secret
            columns that should never drive a sort).

    Returns:
        ``{column_name: True}`` for every column, in table order.

    Raises:
        TypeError: If ``table`` carries no column collection.
    """
    sa_table = getattr(table, "__table__", table)
    columns = getattr(sa_table, "columns", None)
    if columns is None:
        raise TypeError(
            f"Expected a SQLAlchemy Table or mapped class, got {type(table).__name__}."
        )
    skipped = set(exclude or ())
    return {col.name: True for col in columns if col.name not in skipped}


def sortable_columns_from_engine(
    engine: Engine,
    table_name: str,
    *,
    schema: str | None = None,
    exclude: list[str] | None = None,
) -> dict[str, bool]:
    """Reflect ``table_name`` from a live engine and return its allow-list.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        table_name: Table to reflect.
        schema: Optional database schema name (e.g. ``"public"``).
        exclude: Column names to leave out.

    Returns:
        ``{column_name: True}`` for every reflected column.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
        from sqlalchemy import Table as _Table
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for sortable_columns_from_engine(). "
            'Install it with: pip install "selectql[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    table = _Table(table_name, metadata, schema=schema, autoload_with=engine)
    return sortable_columns_from_sqlalchemy(table, exclude=exclude)
