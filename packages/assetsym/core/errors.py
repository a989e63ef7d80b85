"""Exceptions raised by the symbol generator."""

from __future__ import annotations

from pathlib import Path


class AssetSymbolError(Exception):
    """Base exception for all generator errors."""

    pass


class DuplicateIdentifierError(AssetSymbolError):
    """Raised when distinct asset names sanitize to the same identifier.

    Generation is all-or-nothing, so nothing is emitted once this is raised.

    Attributes:
        collisions: Identifier -> every source name that produced it.
    """

    def __init__(self, *, collisions: dict[str, list[str]]) -> None:
        self.collisions = collisions
        details = "; ".join(
            f"{identifier} <- {', '.join(repr(name) for name in names)}"
            for identifier, names in sorted(collisions.items())
        )
        super().__init__(f"Duplicate asset identifiers: {details}")


class CatalogNotFoundError(AssetSymbolError):
    """Raised when the asset catalog directory does not exist."""

    def __init__(self, root: Path) -> None:
        self.root = root
        super().__init__(f"Asset catalog not found: {root}")


class UnknownDialectError(AssetSymbolError, ValueError):
    """Raised when an output dialect is not registered."""

    def __init__(self, dialect: str, available: list[str]) -> None:
        self.dialect = dialect
        self.available = available
        super().__init__(f"Unknown dialect '{dialect}'. Available: {', '.join(available)}")


class RenderError(AssetSymbolError):
    """Raised when an output template fails to render."""

    pass
