from ._log_helper import warn
from ._yaml_loader import YamlLoader
from .config import CONFIG_FILE, DEFAULT_CONFIG, FilterConfig
from .data_model import DataModel, FrozenDataModel
from .exceptions import (
    BadRequestError,
    BaseError,
    ConfigError,
    ErrorCode,
    InvalidFilterOperator,
    InvalidFilters,
    InvalidModel,
    InvalidQuery,
)

__all__ = [
    "CONFIG_FILE",
    "DEFAULT_CONFIG",
    "BadRequestError",
    "BaseError",
    "ConfigError",
    "DataModel",
    "ErrorCode",
    "FilterConfig",
    "FrozenDataModel",
    "InvalidFilterOperator",
    "InvalidFilters",
    "InvalidModel",
    "InvalidQuery",
    "YamlLoader",
    "warn",
]
