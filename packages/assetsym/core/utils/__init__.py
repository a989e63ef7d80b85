"""Shared utilities for assetsym."""

from assetsym.core.utils.json import read_json, write_json
from assetsym.core.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "read_json",
    "write_json",
]
