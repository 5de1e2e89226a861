"""DRUTA scaffolder -- creates and removes component directories.

Each supported platform (Next.js, Expo, React Native) has a fixed pair of
files rendered from Jinja2 templates into ``<working_dir>/<name>/``.

Quick usage::

    from pathlib import Path
    from druta.scaffolder import Action, Platform, run_handler

    run_handler(Platform.NEXT, Action.ADD, "dashboard", Path.cwd())
"""

from druta.scaffolder.handlers import (
    HANDLERS,
    ComponentExistsError,
    ComponentNotFoundError,
    ScaffoldError,
    component_dir,
    create_component,
    delete_component,
    run_handler,
)
from druta.scaffolder.models import PLATFORM_FILES, Action, ComponentRequest, Platform
from druta.scaffolder.templates import TemplateRenderer

__all__ = [
    "HANDLERS",
    "PLATFORM_FILES",
    "Action",
    "ComponentExistsError",
    "ComponentNotFoundError",
    "ComponentRequest",
    "Platform",
    "ScaffoldError",
    "TemplateRenderer",
    "component_dir",
    "create_component",
    "delete_component",
    "run_handler",
]
