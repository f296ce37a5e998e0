import argparse
import json
import sys
from typing import Any

import yaml

from .core import CompilerConfig, YamlLoader, configure_logging
from .core.exceptions import BaseError, ConfigError
from .query import Criteria, CriteriaCompiler, QueryConverter


def compile_file(
    path: str,
    config: str | None,
    log_level: str | None = None,
) -> Any:
    """
    esdata Compile
    """
    compiler_config = (
        CompilerConfig.load(path=config)
        if config is not None
        else CompilerConfig.parse(None)
    )
    level = log_level or compiler_config.log_level
    if level:
        configure_logging(level)
    try:
        obj = YamlLoader.load(path=path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"Criteria file {path} could not be read: {e}")
    criteria = Criteria.from_dict(obj)
    compiler = CriteriaCompiler(config=compiler_config)
    expr = compiler.compile(criteria)
    return QueryConverter(compiler=compiler).convert_expr(expr)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="esdata", description="esdata CLI"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    compile_parser = subparsers.add_parser(
        "compile", help="Compile a criteria file into query DSL"
    )
    compile_parser.add_argument(
        "path", help="Path to the YAML or JSON criteria file"
    )
    compile_parser.add_argument(
        "--config", default=None, help="Path to the compiler config file"
    )
    compile_parser.add_argument(
        "--indent", type=int, default=None, help="JSON indent"
    )
    compile_parser.add_argument(
        "--log-level", default=None, help="Log level"
    )
    args = parser.parse_args(argv)

    if args.command == "compile":
        try:
            result = compile_file(
                path=args.path,
                config=args.config,
                log_level=args.log_level,
            )
        except (BaseError, ConfigError) as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
        print(json.dumps(result, indent=args.indent, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
