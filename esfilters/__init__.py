from .core import (
    BadRequestError,
    BaseError,
    ConfigError,
    ErrorCode,
    FilterConfig,
    InvalidFilterOperator,
    InvalidFilters,
    InvalidModel,
    InvalidQuery,
)
from .filters import (
    ElasticsearchFilters,
    FieldSpec,
    FieldType,
    FieldTypeResolver,
    FilterOperator,
    ModelDescriptor,
    get_filters,
)

__all__ = [
    "BadRequestError",
    "BaseError",
    "ConfigError",
    "ElasticsearchFilters",
    "ErrorCode",
    "FieldSpec",
    "FieldType",
    "FieldTypeResolver",
    "FilterConfig",
    "FilterOperator",
    "InvalidFilterOperator",
    "InvalidFilters",
    "InvalidModel",
    "InvalidQuery",
    "ModelDescriptor",
    "get_filters",
]
