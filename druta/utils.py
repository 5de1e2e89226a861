"""Shared utility functions for DRUTA CLI.

Provides the shared Rich console, coloured status helpers, the welcome
banner, and the small string and file-system helpers used by the scaffolder.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()

# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------


def capitalize_first(value: str) -> str:
    """Upper-case the first character of *value* and leave the rest alone.

    Unlike ``str.capitalize`` the remainder keeps its original casing::

        capitalize_first("userProfile") -> "UserProfile"
        capitalize_first("")            -> ""
    """
    if not value:
        return value
    return value[0].upper() + value[1:]


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object for the directory.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text_file(path: Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, replacing any existing file."""
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


BANNER_GRADIENT: tuple[str, ...] = (
    "#74ebd5",
    "#8ec5fc",
    "#a18cd1",
    "#e0c3fc",
    "#fbc2eb",
)


def print_banner(title: str, tagline: str) -> None:
    """Print the welcome banner shown before the interactive prompt.

    The title is rendered as a panel whose letters fade through a pastel
    gradient, followed by the tagline in blue.
    """
    text = Text(justify="center")
    for index, char in enumerate(title):
        color = BANNER_GRADIENT[index * len(BANNER_GRADIENT) // max(len(title), 1)]
        text.append(char, style=f"bold {color}")

    console.print(Panel(text, border_style=BANNER_GRADIENT[1], expand=False, padding=(1, 4)))
    console.print(f"[blue]{escape(tagline)}[/blue]\n")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
