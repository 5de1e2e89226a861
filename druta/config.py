"""DRUTA CLI configuration.

Typed runtime settings for a single invocation of the tool. Settings use a
Pydantic v2 model so they are validated at construction time; the CLI builds
one instance per run and passes it through the rest of the system.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Runtime configuration for ``drt``.

    ``working_dir`` is the directory components are created in and removed
    from.  It defaults to the process working directory but is always passed
    explicitly to the handlers so tests can point it anywhere.
    """

    working_dir: Path = Field(default_factory=Path.cwd)
    show_banner: bool = Field(default=True, description="Show the banner in interactive mode")
    intro_delay: float = Field(
        default=0.5, ge=0, description="Pause in seconds between the banner and the first prompt"
    )
    banner_title: str = Field(default="DRUTA CLI")
    tagline: str = Field(default="A CLI tool for React Native, Expo, and Next.js components")
