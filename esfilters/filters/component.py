"""
Elasticsearch filters.
"""

from __future__ import annotations

__all__ = ["ElasticsearchFilters", "get_filters"]

from typing import Any

from ..core import DEFAULT_CONFIG, FilterConfig, InvalidFilters
from ._builders import QueryAccumulator, get_clause_builder
from ._helper import FieldTypeResolver
from ._models import ModelDescriptor
from ._normalizer import FilterNormalizer
from ._sorting import SortBuilder


class ElasticsearchFilters:
    config: FilterConfig

    def __init__(self, config: FilterConfig | dict | None = None):
        """Initialize.

        Args:
            config:
                Filter config, as a config or a dict of settings.
                Defaults are used when not provided.
        """
        if config is None:
            self.config = DEFAULT_CONFIG
        elif isinstance(config, FilterConfig):
            self.config = config
        else:
            self.config = FilterConfig.from_dict(config)

    def get_filters(self, model: Any, filters: Any) -> dict[str, Any]:
        """Translate filters into an Elasticsearch query.

        Args:
            model:
                Model descriptor, or anything
                ModelDescriptor.from_model accepts.
            filters:
                Filter expression, e.g.
                {"name": "x", "$in": {"tag": ["a"]}, "$gt": {"id": 1}}.

        Returns:
            Query document shaped {"query": {...}}.

        Raises:
            InvalidFilters:
                If the filters are not an object or an in/nin
                value is not an array.
            InvalidFilterOperator:
                If an operator is not recognized.
            InvalidModel:
                If the model is malformed.
        """
        if not isinstance(filters, dict):
            raise InvalidFilters("Invalid filters: Should be an object")

        descriptor = ModelDescriptor.from_model(model)
        normalized = FilterNormalizer.normalize(filters, self.config)

        acc = QueryAccumulator(model=descriptor, config=self.config)
        for operator, fields in normalized.items():
            build = get_clause_builder(operator)
            for field, value in fields.items():
                build(acc, field, value)

        # bool and range can't be siblings at the query root
        if acc.has_bool() and acc.has_range():
            acc.add_must({"range": acc.query.pop("range")})

        return {"query": acc.query}

    def get_sort(self, model: Any, order: Any) -> dict[str, Any]:
        descriptor = ModelDescriptor.from_model(model)
        return SortBuilder.build(descriptor, order, self.config)

    def get_search_body(
        self,
        model: Any,
        filters: Any = None,
        order: Any = None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if filters is not None:
            body.update(self.get_filters(model, filters))
        if order is not None:
            body.update(self.get_sort(model, order))
        return body

    def get_field_type(self, model: Any, field: str) -> str:
        descriptor = ModelDescriptor.from_model(model)
        return FieldTypeResolver.resolve_type(descriptor, field, self.config)


def get_filters(
    model: Any,
    filters: Any,
    config: FilterConfig | dict | None = None,
) -> dict[str, Any]:
    return ElasticsearchFilters(config=config).get_filters(model, filters)
