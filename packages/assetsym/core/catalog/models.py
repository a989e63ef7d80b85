"""Asset catalog models."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class AssetKind(str, Enum):
    """Asset catalog entry kind.

    Attributes:
        IMAGE: `<name>.imageset` entry.
        COLOR: `<name>.colorset` entry.
    """

    IMAGE = "image"
    COLOR = "color"


# Catalog directory suffix -> entry kind
ASSET_SUFFIXES: dict[str, AssetKind] = {
    ".imageset": AssetKind.IMAGE,
    ".colorset": AssetKind.COLOR,
}


class AssetEntry(BaseModel):
    """A single named entry of an asset catalog.

    Attributes:
        name: Catalog lookup key, namespace-qualified with "/" when a
            group folder provides a namespace.
        kind: Entry kind.
        path: Directory the entry was read from, if any.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    kind: AssetKind = AssetKind.IMAGE
    path: Path | None = None


class AssetCatalog(BaseModel):
    """Ordered collection of asset entries.

    Attributes:
        root: Catalog directory (None for catalogs built from plain names).
        entries: Entries in emission order.
    """

    model_config = ConfigDict(extra="forbid")

    root: Path | None = None
    entries: list[AssetEntry] = Field(default_factory=list)

    @classmethod
    def from_names(cls, names: list[str], kind: AssetKind = AssetKind.IMAGE) -> AssetCatalog:
        """Build a catalog from plain names, keeping their order."""
        return cls(entries=[AssetEntry(name=name, kind=kind) for name in names])

    def list_by_kind(self, kind: AssetKind) -> list[AssetEntry]:
        """List all entries of a given kind, in catalog order."""
        return [e for e in self.entries if e.kind == kind]

    def names(self, kind: AssetKind | None = None) -> list[str]:
        """Entry names in catalog order, optionally filtered by kind."""
        return [e.name for e in self.entries if kind is None or e.kind == kind]
