from ._builders import (
    CLAUSE_BUILDERS,
    ClauseBuilder,
    QueryAccumulator,
    get_clause_builder,
)
from ._helper import FieldTypeResolver
from ._models import (
    RANGE_OPERATORS,
    FieldSpec,
    FieldType,
    FilterOperator,
    ModelDescriptor,
)
from ._normalizer import FilterNormalizer
from ._sorting import SortBuilder, SortDirection
from .component import ElasticsearchFilters, get_filters

__all__ = [
    "CLAUSE_BUILDERS",
    "RANGE_OPERATORS",
    "ClauseBuilder",
    "ElasticsearchFilters",
    "FieldSpec",
    "FieldType",
    "FieldTypeResolver",
    "FilterNormalizer",
    "FilterOperator",
    "ModelDescriptor",
    "QueryAccumulator",
    "SortBuilder",
    "SortDirection",
    "get_clause_builder",
    "get_filters",
]
