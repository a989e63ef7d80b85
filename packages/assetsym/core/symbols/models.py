"""Generated symbol model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from assetsym.core.catalog.models import AssetKind


class AssetSymbol(BaseModel):
    """A generated constant pairing an identifier with its lookup key.

    Attributes:
        source_name: Raw catalog entry name.
        identifier_name: Prefixed PascalCase identifier derived from source_name.
        member_name: lowerCamelCase member name derived from source_name.
        kind: Kind of the catalog entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_name: str = Field(min_length=1)
    identifier_name: str = Field(min_length=1)
    member_name: str = Field(min_length=1)
    kind: AssetKind = AssetKind.IMAGE

    @property
    def literal_value(self) -> str:
        """Runtime lookup key; always the unmodified source name."""
        return self.source_name

    def as_pair(self) -> tuple[str, str]:
        """Return the (identifier_name, literal_value) pair."""
        return (self.identifier_name, self.literal_value)
