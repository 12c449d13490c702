"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    for marker in ("unit", "integration", "link", "storage", "route", "pkg", "state", "cli"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def pearstate_home(tmp_path, monkeypatch):
    """Isolate PEARSTATE_HOME so storage indexes never touch the real home."""
    home = tmp_path / "pearstate-home"
    monkeypatch.setenv("PEARSTATE_HOME", str(home))
    return home


@pytest.fixture
def hello_world() -> Path:
    """Fixture project with a package.json."""
    return FIXTURES / "hello-world"


@pytest.fixture
def pear_key() -> str:
    """A valid 52 character z-base-32 key."""
    return "b9abnxwa71999xsweicj6ndya8w9w39z7ssg43pkohd76kzcgpmo"
