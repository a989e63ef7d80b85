"""Configuration loading utilities with JSON and YAML support."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from assetsym.core.config.models import GeneratorConfig
from assetsym.core.utils.json import read_json

logger = logging.getLogger(__name__)

# Default config path (can be overridden)
_DEFAULT_CONFIG_PATH = Path("assetsym.yaml")

# Environment overrides applied on top of file values
_ENV_OVERRIDES = {
    "ASSETSYM_OUTPUT_DIR": "output_dir",
    "ASSETSYM_IMAGE_PREFIX": "image_prefix",
    "ASSETSYM_COLOR_PREFIX": "color_prefix",
}


def detect_format(file_path: Path | str) -> str:
    """Detect config file format from extension.

    Args:
        file_path: Path to config file

    Returns:
        Format string: "json" or "yaml"

    Raises:
        ValueError: If format cannot be determined

    Example:
        >>> detect_format("assetsym.json")
        'json'
        >>> detect_format("assetsym.yml")
        'yaml'
    """
    suffix = Path(file_path).suffix.lower()

    if suffix == ".json":
        return "json"
    elif suffix in [".yaml", ".yml"]:
        return "yaml"
    else:
        raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: str | Path) -> dict[str, Any]:
    """Load and return raw configuration dictionary.

    Supports both JSON and YAML formats. Format is auto-detected
    from file extension.

    Args:
        path: Path to config file (.json, .yaml, or .yml)

    Returns:
        Raw configuration dictionary

    Raises:
        FileNotFoundError: If config file does not exist
        ValueError: If format is not supported or file content is invalid
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Config file does not exist: {path}")

    fmt = detect_format(path)

    if fmt == "json":
        try:
            content = read_json(path)
        except Exception as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    else:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}") from e

    # safe_load returns None for empty files
    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ValueError(f"Config root must be a mapping in {path}")
    return content


def load_generator_config(path: str | Path | None = None) -> GeneratorConfig:
    """Load and validate generator configuration.

    A missing file at the default path yields defaults; an explicitly
    given path must exist. Environment overrides are applied last.

    Args:
        path: Path to config file (.json, .yaml, or .yml)
              Defaults to assetsym.yaml

    Returns:
        Validated GeneratorConfig instance

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValidationError: If config is invalid
    """
    raw_config: dict[str, Any] = {}
    if path is None:
        if _DEFAULT_CONFIG_PATH.exists():
            raw_config = load_config(_DEFAULT_CONFIG_PATH)
    else:
        raw_config = load_config(path)

    _apply_env_overrides(raw_config)
    return GeneratorConfig.model_validate(raw_config)


def _apply_env_overrides(raw_config: dict[str, Any]) -> None:
    """Fill config values from ASSETSYM_* environment variables (mutates raw_config)."""
    for env_var, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_var)
        if value:
            logger.debug(f"Loaded {key} from {env_var}")
            raw_config[key] = value
