"""Shared test fixtures."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from staticfile_common import FinalizerConfig
from staticfile_buildpack.log import BuildLogger


@pytest.fixture
def build_dir(tmp_path: Path) -> Path:
    path = tmp_path / "build"
    path.mkdir()
    return path


@pytest.fixture
def dep_dir(tmp_path: Path) -> Path:
    path = tmp_path / "deps"
    path.mkdir()
    return path


@pytest.fixture
def tmp_config(build_dir: Path, dep_dir: Path) -> FinalizerConfig:
    """Return a FinalizerConfig pointing at temp directories."""
    return FinalizerConfig(build_dir=build_dir, dep_dir=dep_dir)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def logger(buffer: io.StringIO) -> BuildLogger:
    """A BuildLogger writing plain text into ``buffer``."""
    console = Console(file=buffer, highlight=False, emoji=False, color_system=None)
    return BuildLogger(console)
