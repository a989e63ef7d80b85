"""Tests for end-to-end symbol generation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from assetsym.core.catalog.models import AssetCatalog
from assetsym.core.config.models import GeneratorConfig
from assetsym.core.emit.parser import parse_declarations
from assetsym.core.errors import DuplicateIdentifierError
from assetsym.core.generator import SymbolGenerator, generate_from_directory


@pytest.fixture
def config(tmp_path: Path) -> GeneratorConfig:
    """Config writing python and objc artifacts under tmp_path/out."""
    return GeneratorConfig(dialects=["python", "objc"], output_dir=tmp_path / "out")


class TestSymbolGenerator:
    """SymbolGenerator.run and friends."""

    def test_writes_each_dialect(
        self, config: GeneratorConfig, make_catalog: Callable[..., Path], image_names: list[str]
    ) -> None:
        """One artifact per configured dialect is written."""
        result = generate_from_directory(make_catalog(images=image_names), config)

        assert len(result.symbols) == len(image_names)
        assert [a.path.name for a in result.artifacts] == [
            "GeneratedAssetSymbols.py",
            "GeneratedAssetSymbols.h",
        ]
        assert result.written_count == 2

        header = (config.output_dir / "GeneratedAssetSymbols.h").read_text(encoding="utf-8")
        assert ("ACImageNameLetterABox", "letter_a_box") in parse_declarations(header, "objc")

    def test_second_run_changes_nothing(
        self, config: GeneratorConfig, make_catalog: Callable[..., Path]
    ) -> None:
        """Regenerating an unchanged catalog writes nothing."""
        root = make_catalog(images=["apple", "ant"])
        generate_from_directory(root, config)
        assert generate_from_directory(root, config).written_count == 0

    def test_stale_entries_dropped(
        self, config: GeneratorConfig, make_catalog: Callable[..., Path]
    ) -> None:
        """Removed assets disappear from the regenerated artifact."""
        root = make_catalog(images=["apple", "ant"])
        generate_from_directory(root, config)
        (root / "ant.imageset" / "Contents.json").unlink()
        (root / "ant.imageset").rmdir()

        generate_from_directory(root, config)
        module = (config.output_dir / "GeneratedAssetSymbols.py").read_text(encoding="utf-8")
        assert parse_declarations(module) == [("ImageNameApple", "apple")]

    def test_collision_writes_nothing(self, config: GeneratorConfig) -> None:
        """A collision aborts before any artifact is written."""
        generator = SymbolGenerator(config)
        with pytest.raises(DuplicateIdentifierError):
            generator.run(AssetCatalog.from_names(["a-b", "a_b"]))
        assert not config.output_dir.exists()

    def test_render_only(self, config: GeneratorConfig) -> None:
        """write=False renders without touching disk."""
        result = SymbolGenerator(config).run(AssetCatalog.from_names(["apple"]), write=False)
        assert result.written_count == 0
        assert 'ImageNameApple = "apple"' in result.artifacts[0].text
        assert not config.output_dir.exists()

    def test_stale_artifacts(self, config: GeneratorConfig) -> None:
        """stale_artifacts reports artifacts that differ from disk."""
        generator = SymbolGenerator(config)
        catalog = AssetCatalog.from_names(["apple"])
        assert len(generator.stale_artifacts(catalog)) == 2

        generator.run(catalog)
        assert generator.stale_artifacts(catalog) == []
        assert len(generator.stale_artifacts(AssetCatalog.from_names(["ant"]))) == 2

    def test_custom_prefixes(self, tmp_path: Path) -> None:
        """Configured prefixes flow into identifiers."""
        config = GeneratorConfig(image_prefix="Img", output_dir=tmp_path)
        symbols = SymbolGenerator(config).build(AssetCatalog.from_names(["apple"]))
        assert symbols[0].identifier_name == "ImgApple"
