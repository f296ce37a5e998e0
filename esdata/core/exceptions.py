__all__ = [
    "BaseError",
    "BadRequestError",
    "ConfigError",
    "InvalidCriteriaError",
    "InvalidFieldError",
]


class BaseError(Exception):
    status_code: int


class BadRequestError(BaseError):
    status_code = 400


class InvalidFieldError(BadRequestError):
    """Criteria carries entries but no resolvable field name."""


class InvalidCriteriaError(BadRequestError):
    """Criteria value rejected while building the chain."""


class ConfigError(Exception):
    status_code = 500
