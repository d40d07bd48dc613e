"""Pydantic models for a declarative SELECT plan.

A ``SelectPlan`` describes the same statement a chain of
:class:`~selectql.compile.builder.QueryBuilder` calls would, as data.  It is
convenient when the statement shape lives in configuration or arrives as
JSON::

    plan = SelectPlan.model_validate_json('''
        {
          "table": "orders",
          "columns": ["id", "total"],
          "where": [{"condition": "customer_id = ?", "args": [42]}],
          "order_by": {"column": "total", "direction": "desc"},
          "limit": 10
        }
    ''')
    compiled = QueryBuilder.from_plan(plan, "postgres").compile()

All keys except ``table`` are optional.
"""
from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

#: Values that can be bound to a placeholder.
ArgValue = Union[str, int, float, bool, None]


class AggregateSpec(BaseModel):
    """An aggregate expression added to the SELECT list.

    Attributes:
        function: Function name, inserted verbatim (e.g. ``COUNT``).
        column: Column argument; ``*`` is not quoted.
    """

    model_config = ConfigDict(extra="forbid")

    function: str
    column: str


class JoinSpec(BaseModel):
    """A single JOIN entry.

    Attributes:
        type: ``INNER``, ``LEFT`` or ``RIGHT``.
        table: Joined table name.
        on: Raw ON condition text.
    """

    model_config = ConfigDict(extra="forbid")

    type: Literal["INNER", "LEFT", "RIGHT"] = "INNER"
    table: str
    on: str


class ConditionSpec(BaseModel):
    """A raw condition with ``?`` placeholders and the values they bind."""

    model_config = ConfigDict(extra="forbid")

    condition: str
    args: list[ArgValue] = Field(default_factory=list)


class InSpec(BaseModel):
    """``column IN (...)`` with one bound value per entry."""

    model_config = ConfigDict(extra="forbid")

    column: str
    values: list[ArgValue]


class BetweenSpec(BaseModel):
    """``column BETWEEN start AND end``."""

    model_config = ConfigDict(extra="forbid")

    column: str
    start: ArgValue
    end: ArgValue


class OrderSpec(BaseModel):
    """The single ORDER BY entry.

    Attributes:
        column: Sort column.
        direction: ``ASC`` / ``DESC`` in any case; anything else sorts ``DESC``.
        allowed_columns: Optional allow-list; a column outside it sorts by ``id``.
    """

    model_config = ConfigDict(extra="forbid")

    column: str
    direction: str = "DESC"
    allowed_columns: list[str] | None = None


class SelectPlan(BaseModel):
    """Declarative description of one SELECT statement."""

    model_config = ConfigDict(extra="forbid")

    table: str
    columns: list[str] = Field(default_factory=list)
    distinct: bool = False
    aggregates: list[AggregateSpec] = Field(default_factory=list)
    joins: list[JoinSpec] = Field(default_factory=list)
    where: list[ConditionSpec] = Field(default_factory=list)
    where_in: list[InSpec] = Field(default_factory=list)
    where_between: list[BetweenSpec] = Field(default_factory=list)
    group_by: list[str] = Field(default_factory=list)
    having: list[ConditionSpec] = Field(default_factory=list)
    order_by: OrderSpec | None = None
    limit: int = 0
    offset: int = 0
