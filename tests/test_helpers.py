"""Unit tests for the stateless escaping and placeholder helpers."""

from __future__ import annotations

import pytest

from selectql.compile.helpers import (
    escape_identifier,
    generate_placeholders,
    replace_placeholders,
    validate_direction,
)


class TestEscapeIdentifier:
    def test_postgres_double_quotes(self, pg):
        assert escape_identifier(pg, "users") == '"users"'

    def test_mariadb_backticks(self, maria):
        assert escape_identifier(maria, "users") == "`users`"

    def test_wildcard_passes_through(self, pg, maria):
        assert escape_identifier(pg, "*") == "*"
        assert escape_identifier(maria, "*") == "*"

    def test_embedded_quote_doubled_once(self, pg):
        assert escape_identifier(pg, 'a"b') == '"a""b"'

    def test_embedded_backtick_doubled_once(self, maria):
        assert escape_identifier(maria, "a`b") == "`a``b`"

    def test_other_dialect_quote_left_alone(self, pg, maria):
        assert escape_identifier(pg, "a`b") == '"a`b"'
        assert escape_identifier(maria, 'a"b') == '`a"b`'

    def test_breakout_attempt_stays_inside_identifier(self, pg):
        escaped = escape_identifier(pg, 'x"; DROP TABLE users; --')
        assert escaped == '"x""; DROP TABLE users; --"'

    def test_dotted_name_is_one_identifier(self, pg):
        assert escape_identifier(pg, "public.users") == '"public.users"'


class TestValidateDirection:
    @pytest.mark.parametrize("raw,expected", [
        ("ASC", "ASC"),
        ("asc", "ASC"),
        ("Desc", "DESC"),
        ("sideways", "DESC"),
        ("", "DESC"),
        ("ASC; DROP TABLE t", "DESC"),
    ])
    def test_normalisation(self, raw, expected):
        assert validate_direction(raw) == expected


class TestReplacePlaceholders:
    def test_numbers_from_start_index(self, pg):
        assert replace_placeholders(pg, "a = ? AND b = ?", 3) == "a = $3 AND b = $4"

    def test_no_tokens_unchanged(self, pg):
        assert replace_placeholders(pg, "deleted_at IS NULL", 1) == "deleted_at IS NULL"

    def test_mariadb_returns_input_unchanged(self, maria):
        assert replace_placeholders(maria, "a = ? AND b = ?", 5) == "a = ? AND b = ?"

    def test_token_inside_literal_is_rewritten(self, pg):
        # Textual substitution: the scan does not understand string literals.
        assert replace_placeholders(pg, "note = 'why?'", 1) == "note = 'why$1'"

    def test_existing_dollar_markers_untouched(self, pg):
        assert replace_placeholders(pg, "a = $9 OR b = ?", 1) == "a = $9 OR b = $1"


class TestGeneratePlaceholders:
    def test_postgres_sequence(self, pg):
        assert generate_placeholders(pg, 4, 3) == "$4, $5, $6"

    def test_mariadb_repeated_token(self, maria):
        assert generate_placeholders(maria, 4, 3) == "?, ?, ?"

    def test_zero_count_is_empty(self, pg, maria):
        assert generate_placeholders(pg, 1, 0) == ""
        assert generate_placeholders(maria, 1, 0) == ""
