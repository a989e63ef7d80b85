"""Output dialect definitions.

A dialect pairs a Jinja2 template with the rule that names each declared
constant, so that emitted artifacts can be parsed back and compared.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import re

from assetsym.core.errors import UnknownDialectError
from assetsym.core.symbols.models import AssetSymbol

# Double-quoted string body with backslash escapes
_STRING_BODY = r'"((?:[^"\\]|\\.)*)"'

# Words Swift reserves in member declarations and references
SWIFT_KEYWORDS = frozenset(
    {
        "Any", "Self", "as", "associatedtype", "await", "break", "case", "catch",
        "class", "continue", "default", "defer", "deinit", "do", "else", "enum",
        "extension", "fallthrough", "false", "fileprivate", "for", "func", "guard",
        "if", "import", "in", "init", "inout", "internal", "is", "let", "nil",
        "open", "operator", "precedencegroup", "private", "protocol", "public",
        "repeat", "rethrows", "return", "self", "static", "struct", "subscript",
        "super", "switch", "throw", "throws", "true", "try", "typealias", "var",
        "where", "while",
    }
)  # fmt: skip


@dataclass(frozen=True)
class Dialect:
    """An output language for the emitted artifact.

    Attributes:
        name: Dialect key used in config and on the command line.
        template: Template filename under ``emit/templates``.
        extension: Output file extension.
        declaration: Regex matching one declaration line; group 1 is the
            declared name and group 2 the escaped literal.
        declared_name: Name a symbol is declared under, given the ObjC prefix.
        grouped: Colors are declared before images instead of input order.
    """

    name: str
    template: str
    extension: str
    declaration: re.Pattern[str]
    declared_name: Callable[[AssetSymbol, str], str]
    grouped: bool = True


DIALECTS: dict[str, Dialect] = {
    "python": Dialect(
        name="python",
        template="python.py.j2",
        extension=".py",
        declaration=re.compile(rf"^([A-Za-z_][A-Za-z0-9_]*) = {_STRING_BODY}$", re.MULTILINE),
        declared_name=lambda symbol, _prefix: symbol.identifier_name,
        grouped=False,
    ),
    "objc": Dialect(
        name="objc",
        template="objc.h.j2",
        extension=".h",
        declaration=re.compile(
            rf"^static NSString \* const ([A-Za-z_][A-Za-z0-9_]*) AC_SWIFT_PRIVATE = @{_STRING_BODY};$",
            re.MULTILINE,
        ),
        declared_name=lambda symbol, prefix: prefix + symbol.identifier_name,
    ),
    "swift": Dialect(
        name="swift",
        template="swift.swift.j2",
        extension=".swift",
        declaration=re.compile(
            r"^    static let `?([A-Za-z_][A-Za-z0-9_]*)`? = DeveloperToolsSupport\.\w+Resource"
            rf"\(name: {_STRING_BODY}, bundle: resourceBundle\)$",
            re.MULTILINE,
        ),
        declared_name=lambda symbol, _prefix: symbol.member_name,
    ),
}


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by name.

    Raises:
        UnknownDialectError: If no dialect has this name
    """
    try:
        return DIALECTS[name]
    except KeyError:
        raise UnknownDialectError(name, sorted(DIALECTS)) from None


def list_dialects() -> list[str]:
    """Names of all registered dialects, sorted."""
    return sorted(DIALECTS)


def escape_string(value: str) -> str:
    """Escape a value for a double-quoted C/Swift/Python string literal."""
    return (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )


_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n", "r": "\r", "t": "\t"}
_ESCAPE_SEQUENCE = re.compile(r"\\(.)")


def unescape_string(value: str) -> str:
    """Reverse ``escape_string``."""
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(1)), value)


def swift_identifier(name: str) -> str:
    """Backtick-quote a member name that collides with a Swift keyword.

    Example:
        >>> swift_identifier("default")
        '`default`'
        >>> swift_identifier("airplane")
        'airplane'
    """
    return f"`{name}`" if name in SWIFT_KEYWORDS else name
