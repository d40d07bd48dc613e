"""Test fixtures: sample schema DDL and SelectPlan JSON."""

from __future__ import annotations

from pathlib import Path

from selectql.schema.plan import SelectPlan

_FIXTURES_DIR = Path(__file__).parent


def load_ddl() -> str:
    """Return the sample SQLite DDL (departments, employees)."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()


def load_plan_json() -> str:
    """Return the raw JSON of the sample SelectPlan."""
    return (_FIXTURES_DIR / "plan.json").read_text()


def load_plan() -> SelectPlan:
    """Load the sample SelectPlan from plan.json."""
    return SelectPlan.model_validate_json(load_plan_json())
