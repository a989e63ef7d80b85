"""Build and validate the symbol set for a catalog."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
import logging

from assetsym.core.catalog.models import AssetCatalog, AssetEntry, AssetKind
from assetsym.core.errors import DuplicateIdentifierError
from assetsym.core.symbols.models import AssetSymbol
from assetsym.core.symbols.sanitizer import (
    DEFAULT_COLOR_PREFIX,
    DEFAULT_IMAGE_PREFIX,
    sanitize,
    sanitize_member,
)

logger = logging.getLogger(__name__)


def build_symbol(entry: AssetEntry, prefix: str) -> AssetSymbol:
    """Create the symbol for a single catalog entry."""
    return AssetSymbol(
        source_name=entry.name,
        identifier_name=sanitize(entry.name, prefix),
        member_name=sanitize_member(entry.name),
        kind=entry.kind,
    )


def find_collisions(symbols: Iterable[AssetSymbol]) -> dict[str, list[str]]:
    """Find declared names shared by distinct catalog entries.

    Identifiers must be unique across the whole set, since the python and
    objc dialects declare images and colors side by side. Member names are
    checked per kind, since the swift dialect declares them in separate
    ``ColorResource`` and ``ImageResource`` extensions.

    Returns:
        Colliding name -> source names, in input order (empty if none)
    """
    by_name: dict[tuple, list[AssetSymbol]] = defaultdict(list)
    for symbol in symbols:
        by_name[("identifier", symbol.identifier_name)].append(symbol)
        by_name[("member", symbol.kind, symbol.member_name)].append(symbol)

    collisions: dict[str, list[str]] = {}
    for key, group in by_name.items():
        if len({(s.kind, s.source_name) for s in group}) > 1:
            collisions.setdefault(key[-1], []).extend(s.source_name for s in group)
    return collisions


def check_unique(symbols: Sequence[AssetSymbol]) -> None:
    """Raise if any two distinct asset names share an identifier.

    Raises:
        DuplicateIdentifierError: Listing every collision
    """
    collisions = find_collisions(symbols)
    if collisions:
        logger.error(f"Found {len(collisions)} identifier collision(s)")
        raise DuplicateIdentifierError(collisions=collisions)


def build_symbols(
    catalog: AssetCatalog,
    image_prefix: str = DEFAULT_IMAGE_PREFIX,
    color_prefix: str = DEFAULT_COLOR_PREFIX,
    include_colors: bool = True,
) -> list[AssetSymbol]:
    """Build the validated symbol set for a catalog, preserving catalog order.

    Args:
        catalog: Source catalog
        image_prefix: Identifier prefix for image entries
        color_prefix: Identifier prefix for color entries
        include_colors: Emit color entries as well as images

    Returns:
        One AssetSymbol per (kept) catalog entry

    Raises:
        DuplicateIdentifierError: If two names sanitize to the same identifier
    """
    prefixes = {AssetKind.IMAGE: image_prefix, AssetKind.COLOR: color_prefix}
    entries = catalog.entries if include_colors else catalog.list_by_kind(AssetKind.IMAGE)
    symbols = [build_symbol(entry, prefixes[entry.kind]) for entry in entries]
    check_unique(symbols)
    logger.debug(f"Built {len(symbols)} symbols")
    return symbols


def generate(
    asset_names: Sequence[str], prefix: str = DEFAULT_IMAGE_PREFIX
) -> list[tuple[str, str]]:
    """Map image asset names to (identifier, literal value) pairs.

    Args:
        asset_names: Catalog entry names, in emission order
        prefix: Identifier prefix

    Returns:
        Ordered (identifier_name, literal_value) pairs

    Raises:
        DuplicateIdentifierError: If two names sanitize to the same identifier

    Example:
        >>> generate(["airplane", "letter_a_box"])
        [('ImageNameAirplane', 'airplane'), ('ImageNameLetterABox', 'letter_a_box')]
    """
    catalog = AssetCatalog.from_names(list(asset_names))
    return [symbol.as_pair() for symbol in build_symbols(catalog, image_prefix=prefix)]
