from __future__ import annotations

import os
from typing import Any

import yaml
from pydantic import Field, ValidationError

from ._log_helper import warn
from ._yaml_loader import YamlLoader
from .data_model import FrozenDataModel
from .exceptions import ConfigError

__all__ = ["CONFIG_FILE", "DEFAULT_CONFIG", "FilterConfig"]


CONFIG_FILE = "esfilters.yaml"


class FilterConfig(FrozenDataModel):
    """Filter translation settings.

    Attributes:
        operator_marker:
            Prefix that distinguishes operator keys from field keys.
        exact_suffix:
            Sub-field targeted for fields declared in the model.
        fallback_suffix:
            Sub-field targeted for undeclared fields.
        default_type:
            Field type assumed when the model declares none.
        lowercase_terms:
            Lower-case string elements of in/nin values.
    """

    operator_marker: str = Field(default="$", min_length=1)
    exact_suffix: str = Field(default="raw", min_length=1)
    fallback_suffix: str = Field(default="keyword", min_length=1)
    default_type: str = Field(default="text", min_length=1)
    lowercase_terms: bool = True

    @classmethod
    def from_dict(cls, obj: Any) -> FilterConfig:
        if obj is None:
            return cls()
        if not isinstance(obj, dict):
            raise ConfigError(
                "Invalid config: Should be an object.",
                ConfigError.INVALID_CONFIG,
            )
        try:
            return super().from_dict(obj)
        except ValidationError as e:
            error = e.errors()[0]
            setting = ".".join(str(loc) for loc in error["loc"])
            raise ConfigError(
                f"Invalid setting '{setting}': {error['msg']}.",
                ConfigError.INVALID_SETTING,
            ) from e

    @staticmethod
    def parse(path: str = CONFIG_FILE) -> FilterConfig:
        if not os.path.exists(path):
            warn(f"Config file {path} not found. Using default settings")
            return FilterConfig()
        try:
            obj = YamlLoader.load(path=path)
        except OSError as e:
            raise ConfigError(f"Config file {path} could not be read") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {path} is not valid YAML") from e
        return FilterConfig.from_dict(obj)


DEFAULT_CONFIG = FilterConfig()
