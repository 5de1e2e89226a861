"""Shared pytest fixtures for the DRUTA CLI test suite.

Provides reusable fixtures for:
- An isolated working directory for generated components
- A ``Config`` pointed at that directory with the banner pause disabled
- A ``TemplateRenderer`` over the packaged templates
- A helper that snapshots a directory tree for before/after comparisons
"""

from __future__ import annotations

from pathlib import Path

import pytest

from druta.config import Config
from druta.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory that is also the process cwd for the test."""
    work = tmp_path / "app"
    work.mkdir()
    monkeypatch.chdir(work)
    yield work


@pytest.fixture
def config(workdir: Path) -> Config:
    """Config targeting ``workdir`` with no pause after the banner."""
    return Config(working_dir=workdir, intro_delay=0)


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the templates shipped with the package."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Tree snapshots
# ---------------------------------------------------------------------------

def _snapshot(root: Path) -> dict[str, str | None]:
    """Map every path under *root* to its text content (``None`` for dirs)."""
    return {
        p.relative_to(root).as_posix(): (None if p.is_dir() else p.read_text(encoding="utf-8"))
        for p in sorted(root.rglob("*"))
    }


@pytest.fixture
def snapshot():
    """Return a callable that snapshots a directory tree."""
    return _snapshot
