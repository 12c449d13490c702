"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Problems found while resolving, reported next to the command's data.

    Failed resolutions put the exception text in ``errors``. Non-fatal findings
    such as a missing package.json go in ``warnings``.
    """

    errors: list[str] = Field(default_factory=list, description="Resolution failures; a non-empty list means exit 1")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal findings about the resolved state")
