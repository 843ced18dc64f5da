"""Output schemas for roots commands."""

from pydantic import BaseModel, Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RootEntry(BaseModel):
    """One symbolic root and its current location."""
    name: str = Field(..., description="Root name, e.g. CACHES")
    marker: str = Field(..., description="Persistable URI scheme for the root")
    uri: str | None = Field(..., description="Current absolute URI, null if unavailable")
    error: str | None = Field(..., description="Resolution error, null on success")


class RootsListOutput(BaseOutputSchema):
    """Output schema for roots list command."""
    roots: list[RootEntry] = Field(..., description="Every symbolic root in detection order")


class RootsTmpdirOutput(BaseOutputSchema):
    """Output schema for roots tmpdir command."""
    uri: str = Field(..., description="URI of the new directory, empty string on failure")
    path: str = Field(..., description="Filesystem path of the new directory, empty string on failure")


class RootsInboxOutput(BaseOutputSchema):
    """Output schema for roots inbox command."""
    uri: str | None = Field(..., description="URI of the inbox directory, null if unavailable")
    path: str | None = Field(..., description="Filesystem path of the inbox directory, null if unavailable")


register_output_schema("roots", "list", RootsListOutput)
register_output_schema("roots", "inbox", RootsInboxOutput)
register_output_schema("roots", "tmpdir", RootsTmpdirOutput)
