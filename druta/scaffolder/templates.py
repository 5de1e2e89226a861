"""Jinja2 template rendering for component scaffolding.

Provides the TemplateRenderer class which loads the fixed per-platform
Jinja2 templates shipped in ``druta/scaffolder/templates/`` and renders them
with the component name.  Supports rendering to a string and
rendering straight to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..utils import capitalize_first, write_text_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for component scaffolding.

    Templates live under ``<template_dir>/<platform>/<filename>.j2``.  They
    are rendered with a context dictionary holding the component ``name``;
    the ``capitalize_first`` filter turns it into a component identifier.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
        )
        self.env.filters["capitalize_first"] = capitalize_first

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"next/page.tsx.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        The parent directory must already exist; component directories are
        created by the handlers so that an existing one is never reused.
        """
        content = self.render(template_path, context)
        return write_text_file(Path(output_path), content)

