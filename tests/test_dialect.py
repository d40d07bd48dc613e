"""Unit tests for dialect resolution and the DialectFactory registry."""

from __future__ import annotations

import pytest

from selectql.compile.builder import QueryBuilder
from selectql.dialect import (
    Dialect,
    DialectFactory,
    MariaDBDialect,
    PlaceholderStyle,
    PostgresDialect,
)
from selectql.errors import SelectQLError, UnsupportedDialectError


class TestDialectFactory:
    @pytest.mark.parametrize("target,expected", [
        ("postgres", PostgresDialect),
        ("POSTGRES", PostgresDialect),
        (Dialect.POSTGRES, PostgresDialect),
        ("mariadb", MariaDBDialect),
        (Dialect.MARIADB, MariaDBDialect),
        ("mysql", MariaDBDialect),
    ])
    def test_create(self, target, expected):
        assert isinstance(DialectFactory.create(target), expected)

    def test_instance_returned_as_is(self):
        dialect = MariaDBDialect()
        assert DialectFactory.create(dialect) is dialect

    def test_unknown_target_raises(self):
        with pytest.raises(UnsupportedDialectError) as exc_info:
            DialectFactory.create("oracle")
        err = exc_info.value
        assert err.target == "oracle"
        assert "postgres" in err.registered
        assert isinstance(err, SelectQLError)

    def test_registered_targets(self):
        targets = DialectFactory.registered_targets()
        assert {"postgres", "mariadb", "mysql"} <= set(targets)
        assert targets == sorted(targets)

    def test_register_decorator(self):
        @DialectFactory.register("test_pg_clone")
        class CloneDialect(PostgresDialect):
            pass

        try:
            assert isinstance(DialectFactory.create("test_pg_clone"), CloneDialect)
        finally:
            DialectFactory._dialects.pop("test_pg_clone")

    def test_mixed_case_registration_resolves(self):
        @DialectFactory.register("Cockroach")
        class CockroachDialect(PostgresDialect):
            pass

        try:
            assert "cockroach" in DialectFactory.registered_targets()
            qb = QueryBuilder("Cockroach", "t").where("a = ?", 1)
            assert isinstance(qb.dialect, CockroachDialect)
            assert qb.build() == ('SELECT * FROM "t" WHERE a = $1', [1])
            assert isinstance(DialectFactory.create("COCKROACH"), CockroachDialect)
        finally:
            DialectFactory._dialects.pop("cockroach")

    def test_register_class_stores_lowercase(self):
        DialectFactory.register_class("Maria_Clone", MariaDBDialect)
        try:
            assert isinstance(DialectFactory.create("maria_clone"), MariaDBDialect)
        finally:
            DialectFactory._dialects.pop("maria_clone")

    def test_subclass_under_new_tag_keeps_parent_name(self):
        @DialectFactory.register("pg_clone_named")
        class CloneDialect(PostgresDialect):
            pass

        try:
            compiled = QueryBuilder("pg_clone_named", "t").compile()
            assert compiled.dialect == "postgres"
            assert DialectFactory.create("pg_clone_named") == PostgresDialect()
        finally:
            DialectFactory._dialects.pop("pg_clone_named")

    def test_alias_compiles_with_canonical_name(self):
        assert QueryBuilder("mysql", "t").compile().dialect == "mariadb"


class TestDialectProperties:
    def test_postgres(self):
        d = PostgresDialect()
        assert d.dialect_name == "postgres"
        assert d.quote_char == '"'
        assert d.placeholder_style is PlaceholderStyle.NUMBERED
        assert d.placeholder(7) == "$7"

    def test_mariadb(self):
        d = MariaDBDialect()
        assert d.dialect_name == "mariadb"
        assert d.quote_char == "`"
        assert d.placeholder_style is PlaceholderStyle.QMARK
        assert d.placeholder(7) == "?"

    def test_equality_by_name(self):
        assert PostgresDialect() == PostgresDialect()
        assert PostgresDialect() != MariaDBDialect()
        assert len({MariaDBDialect(), MariaDBDialect()}) == 1
