"""Shared fixtures for format-aliases tests."""

import io

import pytest

from format_aliases.render import Presenter


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's NO_COLOR and config file out of the tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORMAT_ALIASES_CONFIG", str(tmp_path / "missing.yaml"))


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def plain_presenter(streams):
    out, err = streams
    return Presenter(False, out=out, err=err)


@pytest.fixture
def color_presenter(streams):
    out, err = streams
    return Presenter(True, out=out, err=err)
