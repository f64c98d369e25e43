import os

import pytest

from glossa.configuration import reset_settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files and GLOSSA_* variables out of every test."""

    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for key in list(os.environ):
        if key.startswith("GLOSSA_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield workdir
    reset_settings()
