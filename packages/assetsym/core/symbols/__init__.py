"""Identifier sanitization and symbol set construction."""

from assetsym.core.symbols.builder import (
    build_symbol,
    build_symbols,
    check_unique,
    find_collisions,
    generate,
)
from assetsym.core.symbols.models import AssetSymbol
from assetsym.core.symbols.sanitizer import (
    DEFAULT_COLOR_PREFIX,
    DEFAULT_IMAGE_PREFIX,
    sanitize,
    sanitize_member,
    split_words,
)

__all__ = [
    "DEFAULT_COLOR_PREFIX",
    "DEFAULT_IMAGE_PREFIX",
    "AssetSymbol",
    "build_symbol",
    "build_symbols",
    "check_unique",
    "find_collisions",
    "generate",
    "sanitize",
    "sanitize_member",
    "split_words",
]
