"""Shared pytest fixtures for assetsym tests."""

from __future__ import annotations

from collections.abc import Callable
import json
from pathlib import Path

import pytest

from assetsym.core.catalog.models import AssetCatalog
from assetsym.core.symbols.builder import build_symbols
from assetsym.core.symbols.models import AssetSymbol

# ============================================================================
# Asset names
# ============================================================================

# Image names of a real catalog, in the order the reader produces them
CATALOG_IMAGE_NAMES = [
    "airplane",
    "alligator",
    "ant",
    "apple",
    "letter-a-base",
    "letter-a-character",
    "letter-a-eye-white-dots",
    "letter-a-eye-whites",
    "letter-a-eye-whites-with-dots",
    "letter-a-eyebrows",
    "letter-a-eyes-half",
    "letter-a-eyes-open",
    "letter-a-eyes-wide",
    "letter-a-eyes-wide 1",
    "letter-a-left-wink",
    "letter-a-mouth",
    "letter-a-pupils",
    "letter_a_box",
]


@pytest.fixture
def image_names() -> list[str]:
    """Image names in catalog order."""
    return list(CATALOG_IMAGE_NAMES)


@pytest.fixture
def image_symbols(image_names: list[str]) -> list[AssetSymbol]:
    """Validated symbols for the catalog image names."""
    return build_symbols(AssetCatalog.from_names(image_names))


# ============================================================================
# Catalog directory fixtures
# ============================================================================


def _write_contents(directory: Path, contents: dict) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "Contents.json").write_text(json.dumps(contents), encoding="utf-8")


@pytest.fixture
def make_catalog(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating an .xcassets directory under tmp_path.

    Usage:
        root = make_catalog(images=["a"], colors=["Accent"], namespaced={"Icons": ["star"]})
    """

    def _make(
        images: list[str] | None = None,
        colors: list[str] | None = None,
        namespaced: dict[str, list[str]] | None = None,
        groups: dict[str, list[str]] | None = None,
        name: str = "Assets.xcassets",
    ) -> Path:
        root = tmp_path / name
        _write_contents(root, {"info": {"author": "xcode", "version": 1}})
        for image in images or []:
            _write_contents(root / f"{image}.imageset", {"images": []})
        for color in colors or []:
            _write_contents(root / f"{color}.colorset", {"colors": []})
        for folder, folder_images in (namespaced or {}).items():
            _write_contents(root / folder, {"properties": {"provides-namespace": True}})
            for image in folder_images:
                _write_contents(root / folder / f"{image}.imageset", {"images": []})
        for folder, folder_images in (groups or {}).items():
            _write_contents(root / folder, {"info": {"author": "xcode", "version": 1}})
            for image in folder_images:
                _write_contents(root / folder / f"{image}.imageset", {"images": []})
        return root

    return _make
