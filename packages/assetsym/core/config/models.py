"""Configuration models for assetsym."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from assetsym.core.emit.dialects import list_dialects


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file (None logs to stdout)")


class GeneratorConfig(BaseModel):
    """Symbol generation configuration.

    Example:
        >>> config = GeneratorConfig()
        >>> config.image_prefix
        'ImageName'
        >>> config.dialects
        ['python']
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    image_prefix: str = Field(
        default="ImageName",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Identifier prefix for image entries",
    )
    color_prefix: str = Field(
        default="ColorName",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Identifier prefix for color entries",
    )
    objc_prefix: str = Field(
        default="AC",
        pattern=r"^[A-Za-z_]*$",
        description="Extra prefix for Objective-C constant names",
    )
    dialects: list[str] = Field(
        default_factory=lambda: ["python"], min_length=1, description="Output dialects"
    )
    output_dir: Path = Field(default=Path("."), description="Directory artifacts are written to")
    output_basename: str = Field(
        default="GeneratedAssetSymbols",
        min_length=1,
        description="Artifact filename without extension",
    )
    include_colors: bool = Field(default=True, description="Emit color entries as well")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("dialects")
    @classmethod
    def _known_dialects(cls, value: list[str]) -> list[str]:
        available = list_dialects()
        unknown = [d for d in value if d not in available]
        if unknown:
            raise ValueError(f"Unknown dialect(s) {unknown}. Available: {available}")
        # Keep first occurrence order, drop repeats
        return list(dict.fromkeys(value))

    def output_path(self, extension: str) -> Path:
        """Artifact path for a dialect file extension."""
        return self.output_dir / f"{self.output_basename}{extension}"
