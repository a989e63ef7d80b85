"""End-to-end symbol generation: catalog -> symbols -> artifacts."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from assetsym.core.catalog.models import AssetCatalog
from assetsym.core.catalog.reader import read_catalog
from assetsym.core.config.models import GeneratorConfig
from assetsym.core.emit.dialects import get_dialect
from assetsym.core.emit.renderer import ArtifactRenderer
from assetsym.core.emit.writer import is_up_to_date, write_output
from assetsym.core.symbols.builder import build_symbols
from assetsym.core.symbols.models import AssetSymbol

logger = logging.getLogger(__name__)


class Artifact(BaseModel):
    """A rendered artifact and where it belongs.

    Attributes:
        dialect: Dialect the text was rendered in.
        path: Destination file.
        text: Rendered artifact text.
        written: Whether the last write changed the file on disk.
    """

    model_config = ConfigDict(extra="forbid")

    dialect: str
    path: Path
    text: str
    written: bool = False


class GenerationResult(BaseModel):
    """Outcome of one generation run."""

    model_config = ConfigDict(extra="forbid")

    symbols: list[AssetSymbol] = Field(default_factory=list)
    artifacts: list[Artifact] = Field(default_factory=list)

    @property
    def written_count(self) -> int:
        return sum(1 for a in self.artifacts if a.written)


class SymbolGenerator:
    """Generates symbol artifacts for an asset catalog.

    Rendering and writing are separate steps, and rendering completes for
    every dialect before anything is written, so a failure leaves existing
    artifacts untouched.

    Example:
        >>> generator = SymbolGenerator(GeneratorConfig(dialects=["python", "objc"]))
        >>> result = generator.run(read_catalog("Assets.xcassets"))
        >>> [a.path.name for a in result.artifacts]
        ['GeneratedAssetSymbols.py', 'GeneratedAssetSymbols.h']
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        renderer: ArtifactRenderer | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.renderer = renderer or ArtifactRenderer()

    def build(self, catalog: AssetCatalog) -> list[AssetSymbol]:
        """Build the validated symbol set for a catalog."""
        return build_symbols(
            catalog,
            image_prefix=self.config.image_prefix,
            color_prefix=self.config.color_prefix,
            include_colors=self.config.include_colors,
        )

    def render(self, symbols: list[AssetSymbol]) -> list[Artifact]:
        """Render symbols in every configured dialect."""
        artifacts = []
        for dialect in self.config.dialects:
            spec = get_dialect(dialect)
            text = self.renderer.render(symbols, dialect=dialect, objc_prefix=self.config.objc_prefix)
            artifacts.append(
                Artifact(dialect=dialect, path=self.config.output_path(spec.extension), text=text)
            )
        return artifacts

    def run(self, catalog: AssetCatalog, write: bool = True) -> GenerationResult:
        """Build, render and (optionally) write all artifacts.

        Args:
            catalog: Source catalog
            write: Write artifacts to disk; False only renders them

        Returns:
            GenerationResult with symbols and artifacts

        Raises:
            DuplicateIdentifierError: If two names sanitize to the same identifier
            RenderError: If an artifact fails to render
        """
        symbols = self.build(catalog)
        artifacts = self.render(symbols)

        if write:
            for artifact in artifacts:
                artifact.written = write_output(artifact.path, artifact.text)

        result = GenerationResult(symbols=symbols, artifacts=artifacts)
        logger.info(
            f"Generated {len(symbols)} symbols in {len(artifacts)} artifact(s), "
            f"{result.written_count} changed"
        )
        return result

    def stale_artifacts(self, catalog: AssetCatalog) -> list[Artifact]:
        """Artifacts whose file on disk differs from what would be generated."""
        artifacts = self.render(self.build(catalog))
        return [a for a in artifacts if not is_up_to_date(a.path, a.text)]


def generate_from_directory(
    catalog_root: str | Path, config: GeneratorConfig | None = None
) -> GenerationResult:
    """Read a catalog directory and write its symbol artifacts."""
    return SymbolGenerator(config).run(read_catalog(catalog_root))
