"""State construction options."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .Runtime import Runtime


class StateOptions(BaseModel):
    """Inputs to :class:`State`.

    ``flags`` is an open mapping: ``stage``, ``dev``, ``store`` and
    ``tmpStore`` change behavior, every other key passes through untouched.
    """

    model_config = ConfigDict(extra="forbid")

    flags: dict[str, Any] = Field(default_factory=dict, description="Already-parsed launch flags")
    dir: str | None = Field(None, description="Project root directory, defaults to cwd")
    cwd: str | None = Field(None, description="Working directory, defaults to the process cwd")
    link: str | None = Field(None, description="Raw link, defaults to cwd")
    storage: str | None = Field(None, description="Explicit storage override, same as flags.store")
    pid: int | None = Field(None, description="Process id, passed through")
    run: bool = Field(False, description="Running (not developing) the app")
    env: dict[str, str] | None = Field(None, description="Environment, defaults to os.environ")
    runtime: Runtime | None = Field(None, description="Host runtime descriptor")
    routes: dict[str, str] | None = Field(None, description="Route table, defaults to pkg pear.routes")
    unrouted: list[str] | None = Field(None, description="Unrouted prefixes, defaults to pkg pear.unrouted")
