"""Output schemas for state commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class StateShowOutput(BaseOutputSchema):
    """Output schema for state show command.

    Output structure:
    - errors: list[str] - list of error messages, empty list if no errors
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - state: dict[str, Any] - config view of the resolved state, empty on error
    - appname: str | None - application name from package.json
    """

    state: dict[str, Any] = Field(..., description="Config view of the resolved state, empty on error")
    appname: str | None = Field(None, description="Application name from package.json")


class StateRouteOutput(BaseOutputSchema):
    """Output schema for state route command."""

    route: str = Field(..., description="Route that was resolved")
    entrypoint: str = Field(..., description="Entrypoint after applying the route table")
    routed: bool = Field(..., description="True if the route table rewrote the route")


class StatePkgOutput(BaseOutputSchema):
    """Output schema for state pkg command."""

    dir: str = Field(..., description="Directory the lookup started from")
    pkg: dict[str, Any] | None = Field(None, description="Parsed package.json, None if none found")
    appname: str | None = Field(None, description="Application name from package.json")


class StateStorageOutput(BaseOutputSchema):
    """Output schema for state storage command."""

    link: str = Field(..., description="Link the storage was derived from")
    storage: str = Field(..., description="Storage directory, empty string on error")
