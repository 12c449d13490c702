"""Extract the config-relevant subset of a state."""

from typing import Any

from pydantic import BaseModel

from ...constants import CONFIG_KEYS


def config_from(state: Any) -> dict[str, Any]:
    """Return the config keys of ``state`` as plain data.

    ``env`` is always present. Pydantic values (the runtime) are dumped to
    dicts.
    """
    source = vars(state) if not isinstance(state, dict) else state
    config: dict[str, Any] = {"env": dict(source.get("env") or {})}
    for key in CONFIG_KEYS:
        if key == "env" or key not in source:
            continue
        value = source[key]
        config[key] = value.model_dump(mode="python") if isinstance(value, BaseModel) else value
    return config
