"""Dialect registry (Open/Closed Principle).

``DialectFactory`` maps dialect tags to :class:`~selectql.dialect.base.SQLDialect`
implementations.  ``QueryBuilder`` resolves whatever tag it is given through
the factory, so a new convention can be added without touching the builder.

Usage::

    from selectql.dialect.registry import DialectFactory

    @DialectFactory.register("cockroach")
    class CockroachDialect(PostgresDialect):
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ClassVar, Union

from selectql.dialect.base import Dialect, SQLDialect
from selectql.errors import UnsupportedDialectError

logger = logging.getLogger("selectql")

#: Anything ``DialectFactory.create`` knows how to resolve.
DialectLike = Union[Dialect, str, SQLDialect]


class DialectFactory:
    """Registry mapping dialect tags to :class:`SQLDialect` classes.

    Example::

        dialect = DialectFactory.create("postgres")
        dialect = DialectFactory.create(Dialect.MARIADB)
    """

    _dialects: ClassVar[dict[str, type[SQLDialect]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Decorator that registers a dialect class under ``name``.

        Tags are stored lowercased; lookups through :meth:`create` ignore case.

        Args:
            name: The dialect tag (e.g. ``"postgres"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls._dialects[name.lower()] = dialect_cls
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[SQLDialect]) -> None:
        """Register a dialect class without using the decorator form."""
        cls._dialects[name.lower()] = dialect_cls

    @classmethod
    def create(cls, target: DialectLike) -> SQLDialect:
        """Resolve ``target`` to a dialect instance.

        The tag only selects the class.  The instance reports its own
        :attr:`~SQLDialect.dialect_name`, so an alias such as ``"mysql"``, or a
        subclass registered under a new tag without overriding
        ``dialect_name``, compiles with its parent's name and compares equal
        to it.

        Args:
            target: A :class:`Dialect` member, its string value (case is
                ignored), or an already-built :class:`SQLDialect`, which is
                returned as-is.

        Returns:
            A :class:`SQLDialect` instance.

        Raises:
            UnsupportedDialectError: If no dialect is registered for ``target``.
        """
        if isinstance(target, SQLDialect):
            return target
        name = target.value if isinstance(target, Dialect) else str(target).lower()
        dialect_cls = cls._dialects.get(name)
        if dialect_cls is None:
            raise UnsupportedDialectError(str(target), cls.registered_targets())
        logger.debug("Resolved dialect %r to %s", name, dialect_cls.__name__)
        return dialect_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect tags."""
        return sorted(cls._dialects)
