from .core import (
    BadRequestError,
    CompilerConfig,
    ConfigError,
    InvalidCriteriaError,
    InvalidFieldError,
    configure_logging,
)
from .query import (
    BoolQuery,
    Criteria,
    CriteriaCompiler,
    CriteriaQuery,
    OperationKey,
    QueryConverter,
)

__all__ = [
    "BadRequestError",
    "BoolQuery",
    "CompilerConfig",
    "ConfigError",
    "Criteria",
    "CriteriaCompiler",
    "CriteriaQuery",
    "InvalidCriteriaError",
    "InvalidFieldError",
    "OperationKey",
    "QueryConverter",
    "configure_logging",
]
