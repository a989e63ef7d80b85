"""Tests for GeneratorConfig and config loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError
import pytest

from assetsym.core.config.loader import detect_format, load_config, load_generator_config
from assetsym.core.config.models import GeneratorConfig, LoggingConfig


class TestGeneratorConfigDefaults:
    """Default values for GeneratorConfig."""

    def test_all_defaults_valid(self) -> None:
        """Default configuration should be valid."""
        config = GeneratorConfig()

        assert config.image_prefix == "ImageName"
        assert config.color_prefix == "ColorName"
        assert config.objc_prefix == "AC"
        assert config.dialects == ["python"]
        assert config.output_basename == "GeneratedAssetSymbols"
        assert config.include_colors is True
        assert config.logging == LoggingConfig()

    def test_output_path(self) -> None:
        """Artifact paths combine output_dir, basename and extension."""
        config = GeneratorConfig(output_dir=Path("/tmp/derived"))
        assert config.output_path(".h") == Path("/tmp/derived/GeneratedAssetSymbols.h")


class TestGeneratorConfigValidation:
    """Validation of config values."""

    def test_unknown_dialect_rejected(self) -> None:
        """Dialects must be registered."""
        with pytest.raises(ValidationError, match="Unknown dialect"):
            GeneratorConfig(dialects=["kotlin"])

    def test_duplicate_dialects_collapsed(self) -> None:
        """Repeated dialects are emitted once."""
        config = GeneratorConfig(dialects=["objc", "python", "objc"])
        assert config.dialects == ["objc", "python"]

    def test_empty_dialects_rejected(self) -> None:
        """At least one dialect is required."""
        with pytest.raises(ValidationError):
            GeneratorConfig(dialects=[])

    def test_prefix_must_be_identifier(self) -> None:
        """Prefixes must be identifier text."""
        with pytest.raises(ValidationError):
            GeneratorConfig(image_prefix="Image Name")

    def test_invalid_log_level(self) -> None:
        """Logging level is restricted to standard names."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")

    def test_unknown_keys_ignored(self) -> None:
        """Unknown keys are ignored for forward compatibility."""
        config = GeneratorConfig.model_validate({"future_option": True})
        assert not hasattr(config, "future_option")


class TestLoader:
    """Loading config files."""

    def test_detect_format(self) -> None:
        """Format follows the file extension."""
        assert detect_format("a.json") == "json"
        assert detect_format("a.YAML") == "yaml"
        assert detect_format("a.yml") == "yaml"
        with pytest.raises(ValueError, match="Unsupported"):
            detect_format("a.toml")

    def test_load_yaml(self, tmp_path: Path) -> None:
        """YAML files load into GeneratorConfig."""
        path = tmp_path / "assetsym.yaml"
        path.write_text(
            "dialects: [objc, swift]\noutput_dir: build\nlogging:\n  level: DEBUG\n",
            encoding="utf-8",
        )
        config = load_generator_config(path)
        assert config.dialects == ["objc", "swift"]
        assert config.output_dir == Path("build")
        assert config.logging.level == "DEBUG"

    def test_load_json(self, tmp_path: Path) -> None:
        """JSON files load into GeneratorConfig."""
        path = tmp_path / "assetsym.json"
        path.write_text(json.dumps({"image_prefix": "Img"}), encoding="utf-8")
        assert load_generator_config(path).image_prefix == "Img"

    def test_empty_yaml_gives_defaults(self, tmp_path: Path) -> None:
        """An empty YAML file is an empty mapping."""
        path = tmp_path / "assetsym.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Malformed YAML raises ValueError."""
        path = tmp_path / "assetsym.yaml"
        path.write_text("dialects: [objc\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Top-level lists are rejected."""
        path = tmp_path / "assetsym.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_explicit_missing_path(self, tmp_path: Path) -> None:
        """An explicit path must exist."""
        with pytest.raises(FileNotFoundError):
            load_generator_config(tmp_path / "nope.yaml")

    def test_default_path_missing_gives_defaults(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without assetsym.yaml in the working directory defaults apply."""
        monkeypatch.chdir(tmp_path)
        assert load_generator_config() == GeneratorConfig()

    def test_default_path_used(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """assetsym.yaml in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "assetsym.yaml").write_text("objc_prefix: XY\n", encoding="utf-8")
        assert load_generator_config().objc_prefix == "XY"

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """ASSETSYM_* variables override file values."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ASSETSYM_OUTPUT_DIR", "/tmp/out")
        monkeypatch.setenv("ASSETSYM_IMAGE_PREFIX", "Pic")
        config = load_generator_config()
        assert config.output_dir == Path("/tmp/out")
        assert config.image_prefix == "Pic"
