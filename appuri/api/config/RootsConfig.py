"""Per-root location overrides."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..roots.SymbolicRoot import SymbolicRoot


class RootsConfig(BaseModel):
    """Fixed locations that replace platform discovery for individual roots.

    Each value is an absolute path (``~`` allowed) or a ``file:`` URI.
    """

    model_config = ConfigDict(extra="forbid")

    bundle_resource: str | None = Field(None, description="Bundle resources directory")
    documents: str | None = Field(None, description="Documents directory")
    application_support: str | None = Field(None, description="Application support directory")
    caches: str | None = Field(None, description="Caches directory")

    @field_validator("bundle_resource", "documents", "application_support", "caches")
    @classmethod
    def _absolute(cls, value: str | None) -> str | None:
        if value is None or value.lower().startswith("file:"):
            return value
        if not Path(value).expanduser().is_absolute():
            raise ValueError(f"must be an absolute path or file: URI, got {value!r}")
        return value

    def overrides(self) -> dict[SymbolicRoot, str]:
        """Return the configured overrides keyed by root."""
        values = {
            SymbolicRoot.BUNDLE_RESOURCE: self.bundle_resource,
            SymbolicRoot.DOCUMENTS: self.documents,
            SymbolicRoot.APPLICATION_SUPPORT: self.application_support,
            SymbolicRoot.CACHES: self.caches,
        }
        return {root: value for root, value in values.items() if value}
