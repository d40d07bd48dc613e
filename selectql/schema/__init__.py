"""selectQL schema package: declarative plans and allow-list converters."""
from selectql.schema.converters import (
    sortable_columns_from_engine,
    sortable_columns_from_sqlalchemy,
)
from selectql.schema.plan import (
    AggregateSpec,
    ArgValue,
    BetweenSpec,
    ConditionSpec,
    InSpec,
    JoinSpec,
    OrderSpec,
    SelectPlan,
)

__all__ = [
    "AggregateSpec",
    "ArgValue",
    "BetweenSpec",
    "ConditionSpec",
    "InSpec",
    "JoinSpec",
    "OrderSpec",
    "SelectPlan",
    "sortable_columns_from_engine",
    "sortable_columns_from_sqlalchemy",
]
