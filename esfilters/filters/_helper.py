from ..core import DEFAULT_CONFIG, FilterConfig
from ._models import ModelDescriptor


class FieldTypeResolver:
    @staticmethod
    def resolve_suffix(
        model: ModelDescriptor | None,
        field: str,
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> str:
        # Declared fields are provisioned with a raw sub-field, whatever
        # their type. Undeclared ones only have the implicit keyword.
        if model is not None and model.has_field(field):
            return config.exact_suffix
        return config.fallback_suffix

    @staticmethod
    def resolve_type(
        model: ModelDescriptor | None,
        field: str,
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> str:
        field_type = model.get_type(field) if model is not None else None
        return field_type or config.default_type

    @staticmethod
    def resolve_field(
        model: ModelDescriptor | None,
        field: str,
        config: FilterConfig = DEFAULT_CONFIG,
    ) -> str:
        suffix = FieldTypeResolver.resolve_suffix(model, field, config)
        return f"{field}.{suffix}"
