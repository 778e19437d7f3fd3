"""Shared fixtures for levelspec and LevelSpecter CLI tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from libraries.levelspec.config import CaseMode, default_case_mode
from libraries.levelspec.parser import LevelSpecParser


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Keep user configuration and process defaults out of every test."""

    home = tmp_path / "home"
    home.mkdir()
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    for name in (
        "XDG_CONFIG_HOME",
        "LEVELSPECTER_CASE_MODE",
        "LEVELSPECTER_PROFILE",
        "LEVELSPECTER_PROJECT_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    default_case_mode.cache_clear()
    yield
    default_case_mode.cache_clear()
    structlog.reset_defaults()


@pytest.fixture
def sensitive() -> LevelSpecParser:
    return LevelSpecParser(CaseMode.SENSITIVE)


@pytest.fixture
def insensitive() -> LevelSpecParser:
    return LevelSpecParser(CaseMode.INSENSITIVE)
