"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command.

    - section: the section name, empty string when listing all sections
    - content: {"sections": [...]} when listing, otherwise the section dict
    - config_path: path to the configuration file
    """
    section: str = Field(..., description="Section name, empty string if none provided (listing all sections)")
    content: Any = Field(..., description="Section list or section content")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Package version string")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "version", ConfigVersionOutput)
