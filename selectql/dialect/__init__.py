"""selectQL dialect layer: identifier quoting and placeholder conventions."""
from selectql.dialect.base import PLACEHOLDER_TOKEN, Dialect, PlaceholderStyle, SQLDialect
from selectql.dialect.mariadb import MariaDBDialect
from selectql.dialect.postgres import PostgresDialect
from selectql.dialect.registry import DialectFactory, DialectLike

DialectFactory.register_class(Dialect.POSTGRES.value, PostgresDialect)
DialectFactory.register_class(Dialect.MARIADB.value, MariaDBDialect)
DialectFactory.register_class("mysql", MariaDBDialect)

__all__ = [
    "PLACEHOLDER_TOKEN",
    "Dialect",
    "DialectFactory",
    "DialectLike",
    "MariaDBDialect",
    "PlaceholderStyle",
    "PostgresDialect",
    "SQLDialect",
]
