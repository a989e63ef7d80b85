"""Asset catalog directory reader.

Reads an ``.xcassets``-style directory into an ``AssetCatalog``:

- ``<name>.imageset`` directories become image entries
- ``<name>.colorset`` directories become color entries
- plain folders are groups; a group whose ``Contents.json`` sets
  ``properties.provides-namespace`` prefixes the names below it with
  ``<folder>/``
- other asset containers (app icons, data sets, ...) are skipped
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from assetsym.core.catalog.models import ASSET_SUFFIXES, AssetCatalog, AssetEntry
from assetsym.core.errors import CatalogNotFoundError
from assetsym.core.utils.json import read_json

logger = logging.getLogger(__name__)

IGNORED_SUFFIXES = frozenset(
    {
        ".appiconset",
        ".brandassets",
        ".cubetextureset",
        ".dataset",
        ".imagestack",
        ".imagestacklayer",
        ".launchimage",
        ".mipmapset",
        ".spriteatlas",
        ".sticker",
        ".stickerpack",
        ".stickersequence",
        ".symbolset",
        ".textureset",
    }
)

_CONTENTS_FILE = "Contents.json"


def read_catalog(root: str | Path) -> AssetCatalog:
    """Read every image and color entry of a catalog directory.

    Args:
        root: Catalog directory (e.g. ``Assets.xcassets``)

    Returns:
        AssetCatalog with entries ordered by name

    Raises:
        CatalogNotFoundError: If root is missing or not a directory
        ValueError: If a group's Contents.json is not valid JSON
    """
    root = Path(root)
    if not root.is_dir():
        raise CatalogNotFoundError(root)

    entries: list[AssetEntry] = []
    _walk(root, "", entries)

    # Plain code-point order: "letter-a-pupils" sorts before "letter_a_box"
    entries.sort(key=lambda e: e.name)

    logger.debug(f"Read {len(entries)} entries from {root}")
    return AssetCatalog(root=root, entries=entries)


def _walk(directory: Path, namespace: str, entries: list[AssetEntry]) -> None:
    for child in sorted(directory.iterdir()):
        if not child.is_dir():
            continue

        kind = ASSET_SUFFIXES.get(child.suffix)
        if kind is not None:
            entries.append(AssetEntry(name=namespace + child.stem, kind=kind, path=child))
        elif child.suffix in IGNORED_SUFFIXES:
            logger.debug(f"Skipping unsupported asset container: {child.name}")
        else:
            child_namespace = namespace
            if provides_namespace(child):
                child_namespace = f"{namespace}{child.name}/"
            _walk(child, child_namespace, entries)


def provides_namespace(folder: Path) -> bool:
    """Check whether a group folder namespaces the entries it contains.

    Args:
        folder: Group folder inside a catalog

    Returns:
        True if its Contents.json sets ``properties.provides-namespace``

    Raises:
        ValueError: If Contents.json exists but is not valid JSON
    """
    contents_path = folder / _CONTENTS_FILE
    if not contents_path.is_file():
        return False

    try:
        contents = read_json(contents_path)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {contents_path}: {e}") from e

    if not isinstance(contents, dict):
        return False
    properties = contents.get("properties")
    if not isinstance(properties, dict):
        return False
    return bool(properties.get("provides-namespace", False))
