from __future__ import annotations

import os

import yaml
from pydantic import ValidationError

from ._log_helper import warn
from ._yaml_loader import YamlLoader
from .data_model import DataModel
from .exceptions import ConfigError

__all__ = ["CompilerConfig", "LOG_LEVEL_ENV"]


LOG_LEVEL_ENV = "ESDATA_LOG_LEVEL"


class CompilerConfig(DataModel):
    """Compiler config.

    Attributes:
        analyze_wildcard:
            Flag set on wildcard leaves built for
            CONTAINS, STARTS_WITH and ENDS_WITH.
        field_aliases:
            Property name to document field name map,
            applied before any field resolver.
        log_level:
            Log level for the package logger.
    """

    analyze_wildcard: bool = True
    field_aliases: dict[str, str] = dict()
    log_level: str | None = None

    @staticmethod
    def load(path: str) -> CompilerConfig:
        try:
            obj = YamlLoader.load(path=path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigError(f"Config file {path} could not be read: {e}")
        return CompilerConfig.parse(obj or {})

    @staticmethod
    def parse(obj: dict | CompilerConfig | None) -> CompilerConfig:
        if obj is None:
            config = CompilerConfig()
        elif isinstance(obj, CompilerConfig):
            config = obj.model_copy(deep=True)
        elif isinstance(obj, dict):
            try:
                config = CompilerConfig.from_dict(obj)
            except ValidationError as e:
                raise ConfigError(f"Config format error: {e}")
        else:
            raise ConfigError("Config must be a mapping")
        env_level = os.environ.get(LOG_LEVEL_ENV)
        if env_level:
            if config.log_level and config.log_level != env_level:
                warn(
                    f"Log level {config.log_level} overridden by "
                    f"{LOG_LEVEL_ENV}={env_level}"
                )
            config.log_level = env_level
        return config
