"""Configuration management for gql-deprecations."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

import yaml

from . import utils
from .errors import ConfigError

DEFAULT_CONFIG_PATH = ".graphql-deprecations.yaml"

TRUE_VALUES = ("true", "True", "TRUE")
FALSE_VALUES = ("false", "False", "FALSE")


@dataclass
class Config:
    """Configuration for gql-deprecations."""

    schema_file: Optional[str] = None
    operation_files_glob: Optional[str] = None
    report_files: bool = True
    strict_fragments: bool = False

    def override(self, **values) -> "Config":
        """Replace fields with every value that is not None."""
        for key, value in values.items():
            if value is not None:
                setattr(self, key, value)
        return self

    def require(self) -> None:
        """Fail before any processing if a required setting is missing."""
        if not self.schema_file:
            raise ConfigError("Missing schema file path")
        if not self.operation_files_glob:
            raise ConfigError("Missing operations glob")


def load(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses .graphql-deprecations.yaml
            in the working directory when it exists.

    Returns:
        Config object with defaults for missing values.

    Raises:
        ConfigError: If an explicitly requested file is missing or malformed
    """
    if config_path is None:
        if not utils.exists(DEFAULT_CONFIG_PATH):
            return Config()
        config_path = DEFAULT_CONFIG_PATH
    elif not utils.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {config_path}: expected a mapping")

    # Merge with defaults
    return Config(
        schema_file=data.get("schema_file"),
        operation_files_glob=data.get("operation_files_glob"),
        report_files=yaml_flag(data, "report_files", True, config_path),
        strict_fragments=yaml_flag(data, "strict_fragments", False, config_path),
    )


def yaml_flag(data: dict, key: str, default: bool, config_path: str) -> bool:
    """Read a boolean setting; quoted booleans follow the CI input rules."""
    value = data.get(key, default)
    if isinstance(value, bool):
        return value
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid config file {config_path}: {key} must be true or false, got {value!r}")


def get_input(name: str, environ: Mapping[str, str]) -> Optional[str]:
    """
    Read a CI action input.

    Inputs are exposed as INPUT_<NAME> with the name upper-cased and spaces
    replaced by underscores; hyphens are kept.
    """
    value = environ.get(f"INPUT_{name.replace(' ', '_').upper()}", "").strip()
    return value or None


def get_boolean_input(name: str, environ: Mapping[str, str]) -> Optional[bool]:
    """Read a CI action input restricted to the YAML 1.2 core schema booleans."""
    value = get_input(name, environ)
    if value is None:
        return None
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigError(
        f'Input does not meet YAML 1.2 "Core Schema" specification: {name}\n'
        "Support boolean input list: `true | True | TRUE | false | False | FALSE`"
    )


def env_flag(name: str, environ: Mapping[str, str]) -> Optional[bool]:
    """Anything other than the literal 'false' turns a set flag on."""
    if name not in environ:
        return None
    return environ[name] != "false"


def apply_environment(cfg: Config, environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Overlay settings from the environment.

    On CI (CI=true) the action inputs schema-file, operation-files-glob and
    report-files are read; locally SCHEMA_FILE, OPERATION_FILES_GLOB and
    REPORT_FILES. Missing required values are reported by Config.require so
    that CLI options can still supply them.
    """
    if environ is None:
        environ = os.environ

    if environ.get("CI") == "true":
        cfg.override(
            schema_file=get_input("schema-file", environ),
            operation_files_glob=get_input("operation-files-glob", environ),
            report_files=get_boolean_input("report-files", environ),
        )
    else:
        cfg.override(
            schema_file=environ.get("SCHEMA_FILE") or None,
            operation_files_glob=environ.get("OPERATION_FILES_GLOB") or None,
            report_files=env_flag("REPORT_FILES", environ),
        )

    return cfg.override(strict_fragments=env_flag("STRICT_FRAGMENTS", environ))


def create_example_config(path: Optional[str] = None) -> str:
    """Create an example config file and return its path."""
    if path is None:
        path = DEFAULT_CONFIG_PATH

    parent = utils.dirname(path)
    if parent:
        utils.ensure_dir(parent)

    example = {
        "schema_file": "schema.graphql",
        "operation_files_glob": "src/**/*.graphql",
        "report_files": True,
        "strict_fragments": False,
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)

    return path
