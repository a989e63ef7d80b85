"""Asset catalog reading and models."""

from assetsym.core.catalog.models import ASSET_SUFFIXES, AssetCatalog, AssetEntry, AssetKind
from assetsym.core.catalog.reader import IGNORED_SUFFIXES, provides_namespace, read_catalog

__all__ = [
    "ASSET_SUFFIXES",
    "IGNORED_SUFFIXES",
    "AssetCatalog",
    "AssetEntry",
    "AssetKind",
    "provides_namespace",
    "read_catalog",
]
