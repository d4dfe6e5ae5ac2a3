from __future__ import annotations

import re
from enum import Enum
from typing import Any

from pydantic import ValidationError, field_validator

from ..core import FrozenDataModel, InvalidModel, warn


class FilterOperator(str, Enum):
    EQ = "eq"
    NE = "ne"
    IN = "in"
    NIN = "nin"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"


FILTER_OPERATORS = frozenset(op.value for op in FilterOperator)

RANGE_OPERATORS = (
    FilterOperator.GT,
    FilterOperator.GTE,
    FilterOperator.LT,
    FilterOperator.LTE,
)


class FieldType(str, Enum):
    # String
    TEXT = "text"
    KEYWORD = "keyword"

    # Numeric
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    HALF_FLOAT = "half_float"
    SCALED_FLOAT = "scaled_float"
    DOUBLE = "double"

    # Other primitives
    BOOLEAN = "boolean"
    DATE = "date"
    DATE_NANOS = "date_nanos"
    IP = "ip"

    # Spatial
    GEO_POINT = "geo_point"
    GEO_SHAPE = "geo_shape"

    # Structures
    OBJECT = "object"
    NESTED = "nested"

    # Vectors
    DENSE_VECTOR = "dense_vector"
    SPARSE_VECTOR = "sparse_vector"


FIELD_TYPES = frozenset(t.value for t in FieldType)


class FieldSpec(FrozenDataModel):
    """Sortable field spec.

    Attributes:
        type: Declared field type.
    """

    type: str | None = None

    def is_known_type(self) -> bool:
        return self.type is None or self.type in FIELD_TYPES


class ModelDescriptor(FrozenDataModel):
    """Model descriptor.

    Attributes:
        table: Table name the index is derived from.
        sortable_fields: Sortable and filterable fields.
    """

    table: str | None = None
    sortable_fields: dict[str, FieldSpec] = dict()

    @field_validator("sortable_fields", mode="before")
    @classmethod
    def convert_fields(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {
            field: FieldSpec() if isinstance(spec, bool) else spec
            for field, spec in value.items()
        }

    @property
    def index(self) -> str | None:
        if not self.table:
            return None
        return re.sub(
            r"[A-Z]", lambda m: f"_{m.group(0).lower()}", self.table
        )

    def has_field(self, field: str) -> bool:
        return field in self.sortable_fields

    def get_type(self, field: str) -> str | None:
        spec = self.sortable_fields.get(field)
        if spec is None:
            return None
        return spec.type

    def check_types(self) -> list[str]:
        """Warn about fields declared with an unknown type.

        Returns:
            Names of the fields with an unknown type.
        """
        unknown = [
            field
            for field, spec in self.sortable_fields.items()
            if not spec.is_known_type()
        ]
        for field in unknown:
            warn(
                f"Field {field} type {self.sortable_fields[field].type} "
                "is not a known Elasticsearch type"
            )
        return unknown

    @staticmethod
    def from_model(model: Any) -> ModelDescriptor:
        """Build a descriptor from a model.

        Args:
            model:
                None, a descriptor, a dict of sortable fields,
                or an object or class exposing `sortable_fields`
                (or `sortableFields`) and optionally `table`.

        Returns:
            Model descriptor.

        Raises:
            InvalidModel: if the sortable fields or table are malformed.
        """
        if model is None:
            return ModelDescriptor()
        if isinstance(model, ModelDescriptor):
            return model
        if isinstance(model, dict):
            table = None
            fields: Any = model
        else:
            table = getattr(model, "table", None)
            fields = getattr(model, "sortable_fields", None)
            if fields is None:
                fields = getattr(model, "sortableFields", None)

        if fields is not None and not isinstance(fields, dict):
            raise InvalidModel(
                "Invalid sortable fields, it must be an object"
            )
        if table is not None and not isinstance(table, str):
            raise InvalidModel("Invalid table, it must be a string")
        try:
            return ModelDescriptor(table=table, sortable_fields=fields)
        except ValidationError as e:
            raise InvalidModel(f"Invalid model: {e.errors()[0]['msg']}") from e
