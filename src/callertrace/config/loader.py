"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from .schema import TraceConfig


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> TraceConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated TraceConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing or config is invalid
        ValidationError: If config doesn't match schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty file means all defaults
    config_dict = yaml.safe_load(yaml_with_env) or {}

    config = TraceConfig.model_validate(config_dict)

    validate_config(config)

    return config


def validate_config(config: TraceConfig) -> None:
    """
    Perform additional cross-field validation.

    Args:
        config: Configuration to validate

    Raises:
        ValueError: If settings contradict each other
    """
    stack = config.logging.stack
    if stack.enabled and stack.skip >= config.capture.max_depth:
        raise ValueError(
            f"logging.stack.skip ({stack.skip}) must be below "
            f"capture.max_depth ({config.capture.max_depth})"
        )

    if config.capture.default_skip >= config.capture.max_depth:
        raise ValueError(
            f"capture.default_skip ({config.capture.default_skip}) must be below "
            f"capture.max_depth ({config.capture.max_depth})"
        )
