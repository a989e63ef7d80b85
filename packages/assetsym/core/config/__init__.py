"""Configuration management for assetsym."""

from assetsym.core.config.loader import detect_format, load_config, load_generator_config
from assetsym.core.config.models import GeneratorConfig, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_generator_config",
    # Models
    "GeneratorConfig",
    "LoggingConfig",
]
