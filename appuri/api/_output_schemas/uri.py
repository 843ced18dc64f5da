"""Output schemas for uri commands."""

from typing import Literal

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class UriAbsoluteOutput(BaseOutputSchema):
    """Output schema for uri absolute command."""
    uri: str = Field(..., description="Input URI")
    persistable: bool = Field(..., description="Whether the input was a persistable URI")
    absolute: str | None = Field(..., description="Absolute file URI, null if not convertible")
    path: str | None = Field(..., description="Filesystem path of the absolute URI, null if not convertible")


class UriPersistableOutput(BaseOutputSchema):
    """Output schema for uri persistable command."""
    uri: str = Field(..., description="Input URI")
    persistable: str | None = Field(..., description="Persistable URI, null if outside every root")


class UriClassifyOutput(BaseOutputSchema):
    """Output schema for uri classify command."""
    uri: str = Field(..., description="Input URI")
    kind: Literal["persistable", "file", "other"] = Field(..., description="URI form")
    root: str | None = Field(..., description="Root marker for persistable URIs, null otherwise")


register_output_schema("uri", "absolute", UriAbsoluteOutput)
register_output_schema("uri", "persistable", UriPersistableOutput)
register_output_schema("uri", "classify", UriClassifyOutput)
