"""Launch state of an application instance."""

import os
from pathlib import Path
from typing import Any

from ...constants import ALWAYS_UNROUTED
from ..config.normalize_path import normalize_path
from ..link.derive_applink import derive_applink
from ..link.normalize_link import normalize_link
from ..pkg.appname import appname
from ..pkg.local_pkg import local_pkg
from ..route.resolve_route import resolve_route
from ..storage.derive_storage import derive_storage
from ..storage.RandomIdStore import RandomIdStore
from ..storage.storage_from_link import storage_from_link
from .config_from import config_from
from .Runtime import Runtime
from .StateOptions import StateOptions


class State:
    """Resolved launch state.

    Built once from :class:`StateOptions`. Everything except the package
    descriptor is derived synchronously in the constructor; construction
    either succeeds completely or raises. After that the state only changes
    through :meth:`update`.

    Usage:
        state = State(link="pear://keet/chat", flags={"dev": True})
        await state.load_pkg()
    """

    route = staticmethod(resolve_route)
    storage_from_link = staticmethod(storage_from_link)
    local_pkg = staticmethod(local_pkg)
    appname = staticmethod(appname)
    config_from = staticmethod(config_from)

    def __init__(self, options: StateOptions | None = None, ids: RandomIdStore | None = None, **kwargs: Any):
        if options is None:
            options = StateOptions(**kwargs)
        elif kwargs:
            options = StateOptions(**{**options.model_dump(), **kwargs})

        flags = dict(options.flags)
        cwd = str(normalize_path(options.cwd or os.getcwd()))
        dir = str(normalize_path(options.dir, base=cwd)) if options.dir else cwd
        stage = bool(flags.get("stage"))
        dev = bool(flags.get("dev"))

        link = normalize_link(options.link or cwd, cwd)
        applink, route = derive_applink(link, dir, cwd)
        unrouted = [*ALWAYS_UNROUTED, *(options.unrouted or ())]
        resolved = resolve_route(route, options.routes, unrouted)
        storage = derive_storage(
            link,
            project_dir=dir,
            cwd=cwd,
            store=flags.get("store") or options.storage,
            tmp_store=bool(flags.get("tmpStore")),
            ids=ids,
        )

        env = dict(os.environ if options.env is None else options.env)
        if stage or (options.run and not dev):
            env["NODE_ENV"] = "production"
        else:
            env.setdefault("NODE_ENV", "development")

        self.env = env
        self.cwd = cwd
        self.dir = dir
        self.flags = flags
        self.link = link.href
        self.applink = applink
        self.key = link.key.hex() if link.key is not None else None
        self.alias = link.alias
        self.route = route
        self.routes = options.routes
        self.unrouted = unrouted
        self.entrypoint = resolved.entrypoint
        self.routed = resolved.routed
        self.query = link.query
        self.fragment = link.fragment
        self.storage = storage
        self.pid = options.pid
        self.runtime = options.runtime or Runtime.from_host()
        self.dev = dev
        self.stage = stage
        self.run = options.run
        self.pkg: dict[str, Any] | None = None
        self.name: str | None = None
        self._unrouted_option = options.unrouted

    def __repr__(self):
        return f"State(link={self.link!r}, storage={self.storage!r})"

    def update(self, patch: dict[str, Any]) -> "State":
        """Shallow-merge ``patch`` into the state.

        Keys in ``patch`` overwrite, keys not in it survive unchanged.

        Raises:
            ValueError: If a key names a method or helper of the state. Nothing
                is merged in that case.
        """
        reserved = sorted(key for key in patch if key not in vars(self) and callable(getattr(type(self), key, None)))
        if reserved:
            raise ValueError(f"Cannot overwrite State methods with update: {', '.join(reserved)}")
        for key, value in patch.items():
            setattr(self, key, value)
        return self

    async def load_pkg(self) -> dict[str, Any] | None:
        """Look up the project's package.json and fold it into the state.

        Key-addressed apps have no local descriptor, so this resolves to None
        without touching the filesystem. ``pear.routes`` and ``pear.unrouted``
        from the descriptor apply when no route table was passed in.

        Raises:
            PermissionError: If a directory on the way up cannot be read.
            json.JSONDecodeError: If the package.json found is malformed.
        """
        if self.key is not None:
            return None

        pkg = await local_pkg(self.dir)
        patch: dict[str, Any] = {"pkg": pkg, "name": appname(pkg)}
        pear = (pkg or {}).get("pear") or {}
        routes = self.routes if self.routes is not None else pear.get("routes")
        declared = self._unrouted_option if self._unrouted_option is not None else pear.get("unrouted")
        unrouted = [*ALWAYS_UNROUTED, *(declared or ())]
        resolved = resolve_route(self.route, routes, unrouted)
        patch.update(routes=routes, unrouted=unrouted, entrypoint=resolved.entrypoint, routed=resolved.routed)
        self.update(patch)
        return pkg

    def to_dict(self) -> dict[str, Any]:
        """All state properties, including ones added through update."""
        return {key: value for key, value in vars(self).items() if not key.startswith("_")}
