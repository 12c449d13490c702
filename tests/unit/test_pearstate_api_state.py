"""Unit tests for pearstate.api.state.State."""

import asyncio
import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from pearstate import InvalidAppStorageError, InvalidLinkError, State, StateOptions
from pearstate.api.route import RouteResult
from pearstate.api.state import Runtime

pytestmark = pytest.mark.state


class TestEnv:
    def test_initializes_with_minimal_parameters(self):
        state = State(flags={})
        assert state.env is not None
        assert state.cwd is not None

    def test_stage_sets_production(self):
        state = State(flags={"stage": True}, env={"NODE_ENV": "test"})
        assert state.env["NODE_ENV"] == "production"

    def test_run_without_dev_sets_production(self):
        state = State(run=True, flags={"dev": False}, env={})
        assert state.env["NODE_ENV"] == "production"

    def test_run_with_dev_is_not_production(self):
        state = State(run=True, flags={"dev": True}, env={})
        assert state.env["NODE_ENV"] == "development"

    def test_host_node_env_kept_otherwise(self):
        assert State(flags={}, env={"NODE_ENV": "test"}).env["NODE_ENV"] == "test"

    def test_env_is_a_copy(self):
        env = {"HOME": "/home/me"}
        state = State(flags={}, env=env)
        assert state.env["HOME"] == "/home/me"
        assert "NODE_ENV" not in env

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("PEARSTATE_TEST_MARKER", "1")
        assert State(flags={}).env["PEARSTATE_TEST_MARKER"] == "1"


class TestFlags:
    def test_unknown_flags_are_preserved(self):
        state = State(flags={"invalidFlag": True, "nested": {"a": 1}})
        assert state.flags["invalidFlag"] is True
        assert state.flags["nested"] == {"a": 1}

    def test_flags_are_copied(self):
        flags = {"dev": True}
        state = State(flags=flags)
        flags["late"] = 1
        assert "late" not in state.flags

    def test_dev_and_stage_exposed(self):
        state = State(flags={"dev": True})
        assert state.dev is True
        assert state.stage is False


class TestUpdate:
    def test_update_adds_properties(self):
        state = State(flags={})
        state.update({"newProp": "newValue"})
        assert state.newProp == "newValue"
        assert state.flags is not None

    def test_update_overwrites_and_keeps_others(self):
        state = State(flags={"a": 1})
        before = state.to_dict()
        result = state.update({"route": "/other", "extra": 2})

        assert result is state
        after = state.to_dict()
        for key in set(before) | {"route", "extra"}:
            expected = {"route": "/other", "extra": 2}.get(key, before.get(key))
            assert after[key] == expected

    @pytest.mark.parametrize("name", ["update", "load_pkg", "to_dict", "storage_from_link"])
    def test_update_rejects_method_names(self, name):
        state = State(flags={})
        with pytest.raises(ValueError, match=name):
            state.update({name: "x", "extra": 1})
        assert not hasattr(state, "extra")
        assert state.update({"extra": 2}) is state

    def test_update_may_overwrite_route_property(self):
        state = State(flags={})
        state.update({"route": "/other"})
        assert state.route == "/other"
        assert State.route("/a", {"/a": "/b"}, []).routed is True


class TestStaticHelpers:
    def test_route_without_routes(self):
        result = State.route("/test/path", None, [])
        assert result == RouteResult(entrypoint="/test/path", routed=False)

    def test_route_with_routes(self):
        result = State.route(route="/test/path", routes={"/test/path": "/new/path"}, unrouted=[])
        assert result.entrypoint == "/new/path"
        assert result.routed is True

    def test_route_uses_only_given_prefixes(self):
        pathname = "/node_modules/.bin/tool"
        result = State.route(pathname, {pathname: "/X"}, [])
        assert result == RouteResult(entrypoint="/X", routed=True)

    def test_constructed_state_never_routes_node_modules_bin(self, tmp_path):
        pathname = "/node_modules/.bin/tool"
        state = State(
            dir=str(tmp_path),
            link=str(tmp_path / "node_modules" / ".bin" / "tool"),
            flags={},
            routes={pathname: "/X"},
            unrouted=["/assets/"],
        )
        assert state.unrouted == ["/node_modules/.bin/", "/assets/"]
        assert state.entrypoint == pathname
        assert state.routed is False

    def test_route_skips_unrouted(self):
        pathname = "/node_modules/.bin/test"
        result = State.route(route=pathname, routes={}, unrouted=["/node_modules/.bin/"])
        assert result.entrypoint == pathname
        assert result.routed is False

    def test_storage_from_link(self):
        assert "by-random" in State.storage_from_link("file:///some/path/to/a/file.js")
        assert "by-dkey" in State.storage_from_link("pear://keet")

    def test_local_pkg_and_appname(self, hello_world):
        pkg = asyncio.run(State.local_pkg(hello_world))
        assert State.appname(pkg) == "hello-pear"

    def test_config_from_includes_env(self):
        state = State(flags={})
        config = State.config_from(state)
        assert config["env"] == state.env
        assert config["link"] == state.link
        assert isinstance(config["runtime"], dict)

    def test_config_from_sees_updates_of_config_keys(self):
        state = State(flags={}).update({"name": "renamed", "unrelated": 1})
        config = State.config_from(state)
        assert config["name"] == "renamed"
        assert "unrelated" not in config


class TestStorage:
    def test_store_inside_project_raises(self, tmp_path):
        project = tmp_path / "proj"
        with pytest.raises(InvalidAppStorageError):
            State(flags={"store": str(project / "store")}, dir=str(project))

    def test_storage_option_inside_project_raises(self, tmp_path):
        project = tmp_path / "proj"
        with pytest.raises(InvalidAppStorageError):
            State(flags={}, storage=str(project / "store"), dir=str(project))

    def test_store_elsewhere(self, tmp_path):
        store = tmp_path / "elsewhere" / "store"
        state = State(flags={"store": str(store)}, dir=str(tmp_path / "proj"))
        assert state.storage == str(store)

    def test_tmp_store(self):
        state = State(flags={"tmpStore": True})
        assert state.storage.startswith(tempfile.gettempdir())
        assert "by-dkey" not in state.storage
        assert "by-random" not in state.storage

    def test_pear_link_storage(self, pear_key):
        assert "by-dkey" in State(link=f"pear://{pear_key}", flags={}).storage

    def test_file_link_storage_is_stable(self, hello_world):
        first = State(dir=str(hello_world), link=str(hello_world), flags={})
        second = State(dir=str(hello_world), link=str(hello_world / "some" / "route"), flags={})
        assert "by-random" in first.storage
        assert first.storage == second.storage


class TestLink:
    def test_link(self, pear_key):
        pear = f"pear://{pear_key}/check?query"
        assert State(link="/a/b/c", flags={}).link == "file:///a/b/c"
        assert State(link=pear, flags={}).link == pear
        assert State(link="file:///a/b/c", flags={}).link == "file:///a/b/c"

    def test_link_defaults_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        state = State(flags={})
        assert state.link == Path(os.getcwd()).as_uri()
        assert state.applink == state.link
        assert state.route == ""

    def test_applink(self, hello_world, pear_key, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        expected = hello_world.as_uri()
        assert State(dir=str(hello_world), link=str(hello_world), flags={}).applink == expected
        assert State(dir=str(hello_world), link=f"{hello_world}/some/route", flags={}).applink == expected
        assert State(link=f"pear://{pear_key}/check?query", flags={}).applink == f"pear://{pear_key}"
        assert State(link="file:///a/b/c#foo", flags={}).applink == Path(os.getcwd()).as_uri()

    def test_route(self, hello_world, pear_key):
        assert State(dir=str(hello_world), link=f"{hello_world}/some/route", flags={}).route == "/some/route"
        assert State(link=f"pear://{pear_key}/check?query", flags={}).route == "/check"

    def test_key_query_and_fragment(self, pear_key):
        state = State(link=f"pear://{pear_key}/check?query", flags={})
        assert len(state.key) == 64
        assert state.query == "query"
        assert State(link="file:///a/b/c#foo", flags={}).fragment == "foo"

    def test_malformed_link_raises(self):
        with pytest.raises(InvalidLinkError):
            State(link="pear://nope", flags={})


class TestPidAndRuntime:
    def test_sets_pid(self):
        assert State(pid=999, flags={}).pid == 999
        assert State(flags={}).pid is None

    def test_sets_runtime(self):
        state = State(flags={})
        assert state.runtime
        assert state.runtime.mount

    def test_runtime_passthrough(self):
        runtime = Runtime(key="abc", length=12, fork=0, mount="/runtime")
        assert State(flags={}, runtime=runtime).runtime == runtime


class TestOptions:
    def test_options_object(self):
        state = State(StateOptions(flags={"dev": True}, pid=7))
        assert state.pid == 7
        assert state.dev is True

    def test_options_with_overrides(self):
        state = State(StateOptions(flags={"dev": True}, pid=7), pid=8)
        assert state.pid == 8
        assert state.flags == {"dev": True}

    def test_unknown_option_rejected(self):
        with pytest.raises(ValidationError):
            State(flags={}, bogus=True)


class TestLoadPkg:
    def test_loads_descriptor_and_routes(self, hello_world):
        state = State(dir=str(hello_world), link=f"{hello_world}/some/route", flags={})
        assert state.entrypoint == "/some/route"
        assert state.routed is False

        pkg = asyncio.run(state.load_pkg())

        assert pkg["name"] == "hello-world"
        assert state.pkg is pkg
        assert state.name == "hello-pear"
        assert state.entrypoint == "/index.html"
        assert state.routed is True
        assert state.unrouted == ["/node_modules/.bin/", "/assets/"]

    def test_explicit_routes_win_over_descriptor(self, hello_world):
        state = State(
            dir=str(hello_world),
            link=f"{hello_world}/some/route",
            flags={},
            routes={"/some/route": "/explicit.html"},
        )
        asyncio.run(state.load_pkg())
        assert state.entrypoint == "/explicit.html"

    def test_missing_project_dir_uses_ancestor_descriptor(self, tmp_path):
        (tmp_path / "package.json").write_text('{"name": "parent"}')
        state = State(dir=str(tmp_path / "gone"), flags={})
        assert asyncio.run(state.load_pkg()) == {"name": "parent"}
        assert state.name == "parent"

    def test_pear_link_has_no_local_descriptor(self, pear_key, monkeypatch):
        def fail(path):
            raise AssertionError("filesystem should not be read")

        state = State(link=f"pear://{pear_key}", flags={})
        monkeypatch.setattr(os, "listdir", fail)
        assert asyncio.run(state.load_pkg()) is None
        assert state.pkg is None
