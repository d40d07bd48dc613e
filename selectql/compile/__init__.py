"""selectQL compilation layer: builder calls → parameterized SQL."""
from selectql.compile.assembler import StatementAssembler
from selectql.compile.base import CompiledSQL
from selectql.compile.builder import QueryBuilder
from selectql.compile.state import BuilderState

__all__ = [
    "BuilderState",
    "CompiledSQL",
    "QueryBuilder",
    "StatementAssembler",
]
