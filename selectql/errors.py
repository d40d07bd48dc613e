"""Custom exception hierarchy for selectQL.

All public errors inherit from SelectQLError so callers can catch the base
class for any selectQL-specific failure.

Builder mutators never raise: malformed clause text, odd sort directions and
negative pagination values are passed through and only fail once the
statement reaches a real database.  The errors below cover the two places
where input is rejected up front: resolving a dialect tag and parsing a
declarative plan.
"""
from __future__ import annotations


class SelectQLError(Exception):
    """Base exception for all selectQL errors."""


class UnsupportedDialectError(SelectQLError):
    """Raised when a dialect tag has no registered implementation.

    Args:
        target: The tag that could not be resolved.
        registered: Tags that are registered.
    """

    def __init__(self, target: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect target: '{target}'. Registered targets: {registered}."
        )
        self.target = target
        self.registered = registered


class ParseError(SelectQLError):
    """Raised when input cannot be parsed as a valid SelectPlan.

    Args:
        message: Human-readable description.
        raw: The raw string that failed to parse.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw
