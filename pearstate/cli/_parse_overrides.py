"""Collect unrecognized ``state show`` options as launch flags."""

from typing import Any


def _coerce(value: str) -> Any:
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if value.isdigit():
        return int(value)
    return value


def _parse_overrides(args: list[str]) -> dict[str, Any]:
    """Turn leftover ``--name [value]`` args into a flags mapping.

    ``--name value`` and ``--name=value`` both set a flag; a bare ``--name``
    sets it to True. Values "true"/"false" become bools and digit strings
    become ints. Positional leftovers are ignored.

    Examples:
        >>> _parse_overrides(["--store", "/tmp/s", "--dev", "--pid=7"])
        {'store': '/tmp/s', 'dev': True, 'pid': 7}
    """
    flags: dict[str, Any] = {}
    remaining = list(args)
    while remaining:
        arg = remaining.pop(0)
        if not arg.startswith("--"):
            continue
        name, sep, inline = arg[2:].partition("=")
        if sep:
            flags[name] = _coerce(inline)
        elif remaining and not remaining[0].startswith("--"):
            flags[name] = _coerce(remaining.pop(0))
        else:
            flags[name] = True
    return flags
