"""Dialect abstractions: the ``Dialect`` tag and the ``SQLDialect`` ABC.

The Template Method pattern (GoF) is used:
- ``SQLDialect`` implements identifier quoting and placeholder rendering
  once, in terms of two abstract properties.
- ``PostgresDialect`` and ``MariaDBDialect`` only supply the quote
  character and the placeholder style.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum


class Dialect(str, Enum):
    """Tag naming one of the two supported SQL text conventions."""

    POSTGRES = "postgres"
    MARIADB = "mariadb"


class PlaceholderStyle(str, Enum):
    """How bound parameters are written into statement text.

    ``NUMBERED`` writes ``$1, $2, ...``; ``QMARK`` writes a bare ``?`` that
    the driver binds by its position in the text.
    """

    NUMBERED = "numbered"
    QMARK = "qmark"


#: The dialect-neutral placeholder character callers write in conditions.
PLACEHOLDER_TOKEN = "?"


class SQLDialect(ABC):
    """Abstract base for the dialect strategies used by ``QueryBuilder``."""

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name (``'postgres'`` or ``'mariadb'``)."""

    @property
    @abstractmethod
    def quote_char(self) -> str:
        """Return the character used to delimit identifiers."""

    @property
    @abstractmethod
    def placeholder_style(self) -> PlaceholderStyle:
        """Return the placeholder convention for bound parameters."""

    def quote_identifier(self, name: str) -> str:
        """Return ``name`` wrapped in the quote character.

        Embedded quote characters are doubled so the name cannot close the
        quoting early.  The wildcard ``*`` is returned unchanged.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Quoted identifier.
        """
        if name == "*":
            return name
        q = self.quote_char
        escaped = name.replace(q, q + q)
        return f"{q}{escaped}{q}"

    def placeholder(self, index: int) -> str:
        """Return the placeholder for the ``index``-th (1-based) parameter."""
        if self.placeholder_style is PlaceholderStyle.NUMBERED:
            return f"${index}"
        return PLACEHOLDER_TOKEN

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SQLDialect):
            return self.dialect_name == other.dialect_name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.dialect_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
