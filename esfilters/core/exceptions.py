__all__ = [
    "BaseError",
    "BadRequestError",
    "ConfigError",
    "ErrorCode",
    "InvalidFilterOperator",
    "InvalidFilters",
    "InvalidModel",
    "InvalidQuery",
]

from enum import IntEnum


class ErrorCode(IntEnum):
    INVALID_MODEL = 1
    INVALID_QUERY = 2
    ELASTICSEARCH_ERROR = 3
    INVALID_FILTERS = 4
    INVALID_FILTER_OPERATOR = 5
    INDEX_NOT_FOUND = 6
    INDEX_NOT_BUILT = 7


class BaseError(Exception):
    status_code: int
    code: int | None = None

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class BadRequestError(BaseError):
    status_code = 400


class InvalidModel(BadRequestError):
    code = ErrorCode.INVALID_MODEL


class InvalidQuery(BadRequestError):
    code = ErrorCode.INVALID_QUERY


class InvalidFilters(BadRequestError):
    code = ErrorCode.INVALID_FILTERS


class InvalidFilterOperator(BadRequestError):
    code = ErrorCode.INVALID_FILTER_OPERATOR

    def __init__(self, operator: str) -> None:
        super().__init__(f"Invalid filter operator '{operator}'")
        self.operator = operator


class ConfigError(Exception):
    status_code = 500

    INVALID_CONFIG = 1
    INVALID_SETTING = 2

    def __init__(self, message: str, code: int = INVALID_CONFIG) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
