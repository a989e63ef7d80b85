"""Artifact emission: dialects, rendering, parsing and writing."""

from assetsym.core.emit.dialects import (
    DIALECTS,
    Dialect,
    escape_string,
    get_dialect,
    list_dialects,
    swift_identifier,
    unescape_string,
)
from assetsym.core.emit.parser import expected_declarations, parse_declarations
from assetsym.core.emit.renderer import DEFAULT_OBJC_PREFIX, ArtifactRenderer, emit
from assetsym.core.emit.writer import is_up_to_date, write_output

__all__ = [
    "DEFAULT_OBJC_PREFIX",
    "DIALECTS",
    "ArtifactRenderer",
    "Dialect",
    "emit",
    "escape_string",
    "expected_declarations",
    "get_dialect",
    "is_up_to_date",
    "list_dialects",
    "parse_declarations",
    "swift_identifier",
    "unescape_string",
    "write_output",
]
