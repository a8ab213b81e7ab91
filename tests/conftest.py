"""Shared pytest fixtures for gradle-support tests."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def make_gradlew():
    """Factory writing an executable ``#!/bin/sh`` wrapper into a directory."""

    def _make(directory: Path, body: str = "", name: str = "gradlew") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        script = directory / name
        script.write_text("#!/bin/sh\n" + body)
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _make
