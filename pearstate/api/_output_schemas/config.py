"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for version command."""

    version: str = Field(..., description="Package version string")
    home: str = Field(..., description="pearstate home directory")
