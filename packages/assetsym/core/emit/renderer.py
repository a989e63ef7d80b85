"""Artifact rendering with Jinja2."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)

from assetsym.core.catalog.models import AssetKind
from assetsym.core.emit.dialects import escape_string, get_dialect, swift_identifier
from assetsym.core.errors import RenderError
from assetsym.core.symbols.models import AssetSymbol

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_OBJC_PREFIX = "AC"


def _comment(value: str) -> str:
    # Doc comments are single-line
    return " ".join(value.splitlines())


class ArtifactRenderer:
    """Renders symbol sets into dialect artifacts.

    Features:
    - Jinja2 strict mode (StrictUndefined)
    - Fail-fast on missing variables
    - ``cstring``, ``comment`` and ``swiftname`` filters for literals, doc
      comments and Swift member names
    """

    def __init__(self, templates_dir: Path = TEMPLATES_DIR) -> None:
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.env.filters["cstring"] = escape_string
        self.env.filters["comment"] = _comment
        self.env.filters["swiftname"] = swift_identifier
        logger.debug(f"ArtifactRenderer initialized with templates from {templates_dir}")

    def render(
        self,
        symbols: Sequence[AssetSymbol],
        dialect: str = "python",
        objc_prefix: str = DEFAULT_OBJC_PREFIX,
    ) -> str:
        """Render symbols into the text of one artifact.

        Args:
            symbols: Symbols in emission order
            dialect: Output dialect name
            objc_prefix: Prefix for Objective-C constant names

        Returns:
            Artifact text, one declaration line per symbol

        Raises:
            UnknownDialectError: If the dialect is not registered
            RenderError: If rendering fails (missing variables, syntax errors, etc.)
        """
        spec = get_dialect(dialect)
        variables = {
            "symbols": list(symbols),
            "images": [s for s in symbols if s.kind == AssetKind.IMAGE],
            "colors": [s for s in symbols if s.kind == AssetKind.COLOR],
            "objc_prefix": objc_prefix,
        }

        try:
            template = self.env.get_template(spec.template)
            return template.render(**variables)

        except TemplateNotFound as e:
            raise RenderError(f"Template not found for dialect '{dialect}': {e}") from e

        except UndefinedError as e:
            raise RenderError(f"Missing variable in template: {e}") from e

        except TemplateSyntaxError as e:
            raise RenderError(f"Invalid template syntax: {e}") from e


_default_renderer: ArtifactRenderer | None = None


def emit(
    symbols: Sequence[AssetSymbol],
    dialect: str = "python",
    objc_prefix: str = DEFAULT_OBJC_PREFIX,
) -> str:
    """Render symbols with the shared default renderer.

    Deterministic: the same symbols always produce byte-identical text.
    """
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = ArtifactRenderer()
    return _default_renderer.render(symbols, dialect=dialect, objc_prefix=objc_prefix)
