"""Command-line entry point for ``drt``.

Routes ``drt <platform> <action> <name>`` to the matching platform handler,
or falls back to the interactive prompt when no arguments are given.
"""

from __future__ import annotations

import sys
import time

from pydantic import ValidationError
from rich.markup import escape

from .config import Config
from .prompt import PromptCancelled, ask_component_request
from .scaffolder.handlers import ScaffoldError, run_handler
from .scaffolder.models import Action, ComponentRequest, Platform
from .utils import console, print_banner, print_error, print_success, print_warning


HELP_TEXT = """
[blue]USAGE:[/blue]
  drt <platform> <action> <name>

[blue]PLATFORMS:[/blue]
  expo         - For Expo projects
  next         - For Next.js projects
  react-native - For React Native projects

[blue]ACTIONS:[/blue]
  add    - Add a new component/page
  remove - Remove an existing component/page

[blue]EXAMPLES:[/blue]
  drt expo add login    - Create a login component for Expo
  drt next remove about - Remove about page from Next.js project
"""


def display_help() -> None:
    """Print the usage block shown after argument errors."""
    console.print(HELP_TEXT, highlight=False)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


def execute(request: ComponentRequest, config: Config) -> bool:
    """Run the handler for *request* and report the outcome.

    Returns:
        ``True`` if the handler succeeded, ``False`` if it raised a
        ``ScaffoldError``, an ``OSError`` or a ``ValueError`` (names that
        cannot be encoded or contain NUL).
    """
    platform = request.platform.value
    try:
        run_handler(request.platform, request.action, request.name, config.working_dir)
    except (ScaffoldError, OSError, ValueError) as exc:
        verb = "creating" if request.action is Action.ADD else "removing"
        print_error(f"✗ Error {verb} component: {exc}")
        return False

    if request.action is Action.ADD:
        print_success(f"✓ Successfully created {request.name} for {platform}!")
    else:
        print_success(f"✓ Successfully removed {request.name} from {platform}!")
    return True


def run_interactive(config: Config) -> int:
    """Show the banner, ask the questions, then run the chosen handler."""
    if config.show_banner:
        print_banner(config.banner_title, config.tagline)
        time.sleep(config.intro_delay)

    try:
        request = ask_component_request()
    except PromptCancelled as exc:
        print_warning(str(exc))
        return 1

    return 0 if execute(request, config) else 1


def run(tokens: list[str], config: Config) -> int:
    """Validate *tokens* and dispatch them.  Returns the process exit code.

    Only the first three tokens are used; anything after them is ignored.
    """
    if not tokens:
        return run_interactive(config)

    if len(tokens) < 3:
        print_error("Not enough arguments provided")
        display_help()
        return 1

    platform, action, name = tokens[:3]

    if platform not in {p.value for p in Platform}:
        console.print(f"[red]Invalid platform: {escape(platform)}[/red]")
        display_help()
        return 1

    if action not in {a.value for a in Action}:
        console.print(f"[red]Invalid action: {escape(action)}[/red]")
        display_help()
        return 1

    try:
        request = ComponentRequest(platform=Platform(platform), action=Action(action), name=name)
    except ValidationError:
        console.print(f"[red]Invalid name: {escape(repr(name))}[/red]")
        display_help()
        return 1

    return 0 if execute(request, config) else 1


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``drt`` and ``python -m druta``.

    Every token goes to ``run`` unparsed, so names that look like options
    (``-x``) and a lone ``-h`` get the same validation as any other token.
    """
    tokens = sys.argv[1:] if argv is None else list(argv)

    exit_code = run(tokens, Config())
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
