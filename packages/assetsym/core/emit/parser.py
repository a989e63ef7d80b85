"""Parse emitted artifacts back into declarations."""

from __future__ import annotations

from collections.abc import Sequence

from assetsym.core.catalog.models import AssetKind
from assetsym.core.emit.dialects import get_dialect, unescape_string
from assetsym.core.emit.renderer import DEFAULT_OBJC_PREFIX
from assetsym.core.symbols.models import AssetSymbol


def parse_declarations(text: str, dialect: str = "python") -> list[tuple[str, str]]:
    """Extract the (declared name, literal value) pairs of an artifact.

    Args:
        text: Artifact text produced by ``emit``
        dialect: Dialect the text was emitted in

    Returns:
        Pairs in declaration order

    Raises:
        UnknownDialectError: If the dialect is not registered
    """
    spec = get_dialect(dialect)
    return [(m.group(1), unescape_string(m.group(2))) for m in spec.declaration.finditer(text)]


def expected_declarations(
    symbols: Sequence[AssetSymbol],
    dialect: str = "python",
    objc_prefix: str = DEFAULT_OBJC_PREFIX,
) -> list[tuple[str, str]]:
    """Pairs that ``parse_declarations`` should return for an emitted artifact.

    Follows the dialect's declaration order: grouped dialects declare
    colors before images, others keep input order.
    """
    spec = get_dialect(dialect)
    ordered = list(symbols)
    if spec.grouped:
        ordered = [s for s in symbols if s.kind == AssetKind.COLOR] + [
            s for s in symbols if s.kind == AssetKind.IMAGE
        ]
    return [(spec.declared_name(s, objc_prefix), s.literal_value) for s in ordered]
