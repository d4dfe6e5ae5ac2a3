from enum import Enum
from typing import Any

from ..core import DEFAULT_CONFIG, FilterConfig, InvalidQuery
from ._helper import FieldTypeResolver
from ._models import ModelDescriptor


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortBuilder:
    @staticmethod
    def build(
        model: ModelDescriptor,
        order: Any,
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> dict[str, list[dict[str, str]]]:
        if not isinstance(order, dict):
            raise InvalidQuery("Invalid order: Should be an object")
        sort: list[dict[str, str]] = []
        for field, direction in order.items():
            try:
                if not isinstance(direction, str):
                    raise ValueError(direction)
                direction = SortDirection(direction.lower())
            except ValueError:
                raise InvalidQuery(
                    f"Invalid order direction '{direction}' for {field}"
                ) from None
            resolved = FieldTypeResolver.resolve_field(model, field, config)
            sort.append({resolved: direction.value})
        return {"sort": sort}
