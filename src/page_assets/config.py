"""Loading and validation of PageAssetsConfig."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from schemas.config import PageAssetsConfig

from .exceptions import ConfigurationError


def build_config(options: dict[str, Any] | None = None) -> PageAssetsConfig:
    """Validate raw options into an immutable configuration.

    Args:
        options: Option mapping using camelCase or snake_case keys

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If any option is unknown or invalid
    """
    try:
        return PageAssetsConfig.model_validate(options or {})
    except PydanticValidationError as e:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(errors)}",
            errors=errors,
        ) from e


def load_config(
    config_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> PageAssetsConfig:
    """Load a JSON configuration file and apply overrides on top of it.

    Args:
        config_path: Optional JSON file holding an options object
        overrides: Options that replace values from the file

    Returns:
        The validated configuration

    Raises:
        ConfigurationError: If the file cannot be read or the result is invalid
    """
    options: dict[str, Any] = {}
    if config_path is not None:
        try:
            data = json.loads(config_path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read config {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {config_path} must hold a JSON object")
        options.update(data)

    for key, value in (overrides or {}).items():
        # an override may use either spelling of a key already in the file
        options.pop(key, None)
        options.pop(to_camel(key), None)
        options[key] = value

    return build_config(options)
