from typing import Any

from ..core import (
    DEFAULT_CONFIG,
    FilterConfig,
    InvalidFilterOperator,
    InvalidFilters,
)
from ._models import FILTER_OPERATORS, FilterOperator


class FilterNormalizer:
    @staticmethod
    def normalize(
        filters: dict[str, Any],
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> dict[str, dict[str, Any]]:
        """Flatten filters into an operator -> field -> value map.

        Bare field keys become equality filters. Operator keys lose
        their marker. Entries for the same operator are merged, later
        fields overwriting earlier ones. Value shapes are left to the
        clause builders, except that an operator value must be an
        object to be merged.

        Args:
            filters:
                Raw filter expression.
            config:
                Filter config.

        Returns:
            Normalized filter map.

        Raises:
            InvalidFilterOperator:
                If an operator with a non-object value is not recognized.
            InvalidFilters:
                If a recognized operator has a non-object value.
        """
        marker = config.operator_marker
        normalized: dict[str, dict[str, Any]] = {}
        for key, value in filters.items():
            if isinstance(key, str) and key.startswith(marker):
                operator = key[len(marker) :]
                if not isinstance(value, dict):
                    if operator not in FILTER_OPERATORS:
                        raise InvalidFilterOperator(operator)
                    raise InvalidFilters(
                        f"Invalid filters: {key} must be an object"
                    )
                fields = value
            else:
                operator = FilterOperator.EQ.value
                fields = {key: value}
            normalized.setdefault(operator, {}).update(fields)
        return normalized
