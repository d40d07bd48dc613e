"""PostgreSQL dialect."""

from __future__ import annotations

from selectql.dialect.base import Dialect, PlaceholderStyle, SQLDialect


class PostgresDialect(SQLDialect):
    """PostgreSQL-flavoured statement text.

    Parameter style: ``$1, $2, ...`` – compatible with ``asyncpg`` and
    other drivers that bind by explicit position.
    """

    @property
    def dialect_name(self) -> str:
        return Dialect.POSTGRES.value

    @property
    def quote_char(self) -> str:
        return '"'

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        return PlaceholderStyle.NUMBERED
