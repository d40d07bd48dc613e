"""MariaDB / MySQL dialect."""

from __future__ import annotations

from selectql.dialect.base import Dialect, PlaceholderStyle, SQLDialect


class MariaDBDialect(SQLDialect):
    """MariaDB-flavoured statement text.

    Parameter style: ``?`` – each occurrence is bound by its position in the
    statement, as ``mariadb`` and ``mysql-connector-python`` (prepared
    cursors) do.

    Identifiers are quoted with backticks (`` ` ``) rather than double-quotes.
    The same convention serves MySQL, so ``"mysql"`` resolves here too.
    """

    @property
    def dialect_name(self) -> str:
        return Dialect.MARIADB.value

    @property
    def quote_char(self) -> str:
        return "`"

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        return PlaceholderStyle.QMARK
