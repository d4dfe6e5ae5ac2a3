from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..core import (
    DEFAULT_CONFIG,
    FilterConfig,
    InvalidFilterOperator,
    InvalidFilters,
)
from ._helper import FieldTypeResolver
from ._models import RANGE_OPERATORS, FilterOperator, ModelDescriptor

__all__ = [
    "CLAUSE_BUILDERS",
    "ClauseBuilder",
    "QueryAccumulator",
    "get_clause_builder",
]


class QueryAccumulator:
    """Query document under construction.

    Owned by a single translation call. The bool clause lists and
    the range map are created on first use.
    """

    model: ModelDescriptor
    config: FilterConfig
    query: dict[str, Any]

    def __init__(
        self,
        model: ModelDescriptor,
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> None:
        self.model = model
        self.config = config
        self.query = {}

    def add_must(self, clause: dict[str, Any]) -> None:
        self._add_bool("must", clause)

    def add_must_not(self, clause: dict[str, Any]) -> None:
        self._add_bool("must_not", clause)

    def add_range(self, field: str, operator: str, value: Any) -> None:
        ranges = self.query.setdefault("range", {})
        ranges.setdefault(field, {})[operator] = value

    def has_bool(self) -> bool:
        return "bool" in self.query

    def has_range(self) -> bool:
        return "range" in self.query

    def _add_bool(self, occur: str, clause: dict[str, Any]) -> None:
        bool_query = self.query.setdefault("bool", {})
        bool_query.setdefault(occur, []).append(clause)


ClauseBuilder = Callable[[QueryAccumulator, str, Any], None]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _term_clause(acc: QueryAccumulator, field: str, value: Any) -> dict:
    resolved = FieldTypeResolver.resolve_field(acc.model, field, acc.config)
    return {"term": {resolved: value}}


def _terms_clause(
    acc: QueryAccumulator, operator: FilterOperator, field: str, value: Any
) -> dict:
    if not _is_sequence(value):
        raise InvalidFilters(
            f"Invalid filters: {operator.value} value for {field} "
            "must be an array"
        )
    if acc.config.lowercase_terms:
        terms = [v.lower() if isinstance(v, str) else v for v in value]
    else:
        terms = list(value)
    return {"terms": {field: terms}}


def build_eq(acc: QueryAccumulator, field: str, value: Any) -> None:
    acc.add_must(_term_clause(acc, field, value))


def build_ne(acc: QueryAccumulator, field: str, value: Any) -> None:
    acc.add_must_not(_term_clause(acc, field, value))


def build_in(acc: QueryAccumulator, field: str, value: Any) -> None:
    acc.add_must(_terms_clause(acc, FilterOperator.IN, field, value))


def build_nin(acc: QueryAccumulator, field: str, value: Any) -> None:
    acc.add_must_not(_terms_clause(acc, FilterOperator.NIN, field, value))


def _range_builder(operator: FilterOperator) -> ClauseBuilder:
    def build_range(acc: QueryAccumulator, field: str, value: Any) -> None:
        acc.add_range(field, operator.value, value)

    return build_range


CLAUSE_BUILDERS: dict[FilterOperator, ClauseBuilder] = {
    FilterOperator.EQ: build_eq,
    FilterOperator.NE: build_ne,
    FilterOperator.IN: build_in,
    FilterOperator.NIN: build_nin,
} | {operator: _range_builder(operator) for operator in RANGE_OPERATORS}


def get_clause_builder(operator: str) -> ClauseBuilder:
    try:
        return CLAUSE_BUILDERS[FilterOperator(operator)]
    except ValueError:
        raise InvalidFilterOperator(operator) from None
