"""Stateless text helpers shared by the builder and the assembler.

Every function takes the resolved :class:`~selectql.dialect.base.SQLDialect`
first and is a pure function of its arguments.
"""
from __future__ import annotations

from selectql.dialect.base import PLACEHOLDER_TOKEN, PlaceholderStyle, SQLDialect

#: Sort directions accepted verbatim by :func:`validate_direction`.
SORT_DIRECTIONS: frozenset[str] = frozenset({"ASC", "DESC"})

#: Direction used when the caller supplies anything else.
DEFAULT_DIRECTION = "DESC"


def escape_identifier(dialect: SQLDialect, name: str) -> str:
    """Quote a table or column name for ``dialect``.

    The wildcard ``*`` passes through.  Otherwise the name is wrapped in the
    dialect's quote character with embedded quote characters doubled.  No
    other validation happens: names are expected to come from code, not from
    end users.
    """
    return dialect.quote_identifier(name)


def validate_direction(direction: str) -> str:
    """Normalise an ORDER BY direction to ``ASC`` or ``DESC``.

    Case is ignored; any other value falls back to ``DESC``.
    """
    normalized = direction.upper()
    if normalized not in SORT_DIRECTIONS:
        return DEFAULT_DIRECTION
    return normalized


def replace_placeholders(dialect: SQLDialect, condition: str, start_idx: int) -> str:
    """Rewrite the ``?`` tokens in ``condition`` into ``dialect``'s wire form.

    ``?``-style dialects get the text back unchanged.  Numbered dialects get
    each ``?`` replaced with ``$start_idx``, ``$start_idx + 1``, ...

    The scan is purely textual: a ``?`` inside a quoted string literal is
    rewritten too, so callers must not embed one there.

    Args:
        dialect: Target dialect.
        condition: Raw condition text using ``?`` for every bound value.
        start_idx: 1-based position of the first placeholder in the statement.

    Returns:
        The rewritten condition text.
    """
    if dialect.placeholder_style is PlaceholderStyle.QMARK:
        return condition

    parts: list[str] = []
    index = start_idx
    for char in condition:
        if char == PLACEHOLDER_TOKEN:
            parts.append(dialect.placeholder(index))
            index += 1
        else:
            parts.append(char)
    return "".join(parts)


def generate_placeholders(dialect: SQLDialect, start_idx: int, count: int) -> str:
    """Return ``count`` comma-separated placeholders starting at ``start_idx``.

    Example::

        generate_placeholders(PostgresDialect(), 3, 2)  # "$3, $4"
        generate_placeholders(MariaDBDialect(), 3, 2)   # "?, ?"
    """
    return ", ".join(dialect.placeholder(start_idx + i) for i in range(count))
