from ._log_helper import configure_logging, logger, warn
from ._yaml_loader import YamlLoader
from .config import CompilerConfig
from .data_model import DataModel
from .exceptions import (
    BadRequestError,
    BaseError,
    ConfigError,
    InvalidCriteriaError,
    InvalidFieldError,
)

__all__ = [
    "BadRequestError",
    "BaseError",
    "CompilerConfig",
    "ConfigError",
    "DataModel",
    "InvalidCriteriaError",
    "InvalidFieldError",
    "YamlLoader",
    "configure_logging",
    "logger",
    "warn",
]
