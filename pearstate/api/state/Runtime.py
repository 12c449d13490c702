"""Runtime descriptor."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config.get_package_version import get_package_version


class Runtime(BaseModel):
    """Checkout of the runtime executing the application, supplied by the host."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., min_length=1, description="Runtime key, or the checkout path for local runtimes")
    length: int | None = Field(None, ge=0, description="Checked out length, None for local checkouts")
    fork: int | None = Field(None, ge=0, description="Fork identifier, None for local checkouts")
    mount: str = Field(..., min_length=1, description="Directory the runtime is mounted at")
    version: str = Field("unknown", description="Runtime version string")

    @classmethod
    def from_host(cls) -> "Runtime":
        """Describe the locally installed pearstate package as the runtime."""
        mount = str(Path(__file__).resolve().parents[2])
        return cls(key=mount, length=None, fork=None, mount=mount, version=get_package_version())
