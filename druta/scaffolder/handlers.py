"""Platform handlers that create and remove component directories.

Each (platform, action) pair maps to one handler in ``HANDLERS``.  Every
handler takes the component name and the working directory explicitly, does
its file-system work synchronously, and returns the component directory.
Failures raise ``ScaffoldError`` subclasses; ``OSError`` from the file
system propagates unchanged.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from ..utils import ensure_dir
from .models import PLATFORM_FILES, PLATFORM_LABELS, Action, Platform
from .templates import TemplateRenderer

Handler = Callable[[str, str | Path], Path]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for handler failures that are reported to the user."""


class ComponentExistsError(ScaffoldError):
    """Raised by ``add`` when the component directory is already present."""

    def __init__(self, platform: Platform, name: str) -> None:
        self.platform = platform
        self.name = name
        super().__init__(f'{PLATFORM_LABELS[platform]} "{name}" already exists')


class ComponentNotFoundError(ScaffoldError):
    """Raised by ``remove`` when the component directory is missing."""

    def __init__(self, platform: Platform, name: str) -> None:
        self.platform = platform
        self.name = name
        super().__init__(f'{PLATFORM_LABELS[platform]} "{name}" doesn\'t exist')


# ---------------------------------------------------------------------------
# Shared add / remove algorithms
# ---------------------------------------------------------------------------


def component_dir(name: str, working_dir: str | Path) -> Path:
    """Return the directory a component called *name* lives in."""
    return Path(working_dir) / name


def create_component(
    platform: Platform,
    name: str,
    working_dir: str | Path,
    renderer: TemplateRenderer | None = None,
) -> Path:
    """Create ``<working_dir>/<name>`` and write the platform's files into it.

    Files are written in ``PLATFORM_FILES`` order.  A write failure leaves
    the files written so far in place.

    Raises:
        ComponentExistsError: If the directory already exists.
    """
    target = component_dir(name, working_dir)
    if target.exists():
        raise ComponentExistsError(platform, name)

    renderer = renderer or TemplateRenderer()
    ensure_dir(target)

    context = {"name": name}
    for filename in PLATFORM_FILES[platform]:
        renderer.render_to_file(
            f"{platform.value}/{filename}.j2",
            target / filename,
            context,
        )
    return target


def delete_component(platform: Platform, name: str, working_dir: str | Path) -> Path:
    """Delete ``<working_dir>/<name>`` and everything inside it.

    Entries that disappear while the tree is being removed are ignored.

    Raises:
        ComponentNotFoundError: If the directory does not exist.
    """
    target = component_dir(name, working_dir)
    if not target.exists():
        raise ComponentNotFoundError(platform, name)

    if target.is_dir() and not target.is_symlink():
        _force_rmtree(target)
    else:
        target.unlink(missing_ok=True)
    return target


def _force_rmtree(path: Path) -> None:
    def _ignore_missing(func, failed_path, exc) -> None:
        # onerror passes an exc_info tuple, onexc the exception itself.
        error = exc[1] if isinstance(exc, tuple) else exc
        if isinstance(error, FileNotFoundError):
            return
        raise error

    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_ignore_missing)
    else:
        shutil.rmtree(path, onerror=_ignore_missing)


# ---------------------------------------------------------------------------
# Per-platform handlers
# ---------------------------------------------------------------------------


def add_next_component(name: str, working_dir: str | Path, renderer: TemplateRenderer | None = None) -> Path:
    """Create a Next.js route segment with ``page.tsx`` and ``layout.tsx``."""
    return create_component(Platform.NEXT, name, working_dir, renderer)


def remove_next_component(name: str, working_dir: str | Path) -> Path:
    return delete_component(Platform.NEXT, name, working_dir)


def add_expo_component(name: str, working_dir: str | Path, renderer: TemplateRenderer | None = None) -> Path:
    """Create an Expo screen with ``index.tsx`` and ``styles.js``."""
    return create_component(Platform.EXPO, name, working_dir, renderer)


def remove_expo_component(name: str, working_dir: str | Path) -> Path:
    return delete_component(Platform.EXPO, name, working_dir)


def add_react_native_component(
    name: str, working_dir: str | Path, renderer: TemplateRenderer | None = None
) -> Path:
    """Create a React Native component with ``index.jsx`` and ``styles.js``."""
    return create_component(Platform.REACT_NATIVE, name, working_dir, renderer)


def remove_react_native_component(name: str, working_dir: str | Path) -> Path:
    return delete_component(Platform.REACT_NATIVE, name, working_dir)


HANDLERS: dict[tuple[Platform, Action], Handler] = {
    (Platform.NEXT, Action.ADD): add_next_component,
    (Platform.NEXT, Action.REMOVE): remove_next_component,
    (Platform.EXPO, Action.ADD): add_expo_component,
    (Platform.EXPO, Action.REMOVE): remove_expo_component,
    (Platform.REACT_NATIVE, Action.ADD): add_react_native_component,
    (Platform.REACT_NATIVE, Action.REMOVE): remove_react_native_component,
}


def run_handler(platform: Platform, action: Action, name: str, working_dir: str | Path) -> Path:
    """Look up and run the handler for *platform* and *action*."""
    return HANDLERS[(platform, action)](name, working_dir)
