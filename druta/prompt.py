"""Interactive prompt used when ``drt`` is run without arguments.

Asks for the platform, the action and the component name, one question at a
time, and turns the answers into a ``ComponentRequest``.
"""

from __future__ import annotations

from typing import Any

import questionary

from .scaffolder.models import Action, ComponentRequest, Platform


class PromptCancelled(Exception):
    """Raised when the user aborts the interactive prompt."""


def validate_component_name(value: str) -> bool | str:
    """Accept any name that is not empty or whitespace-only."""
    return True if value.strip() != "" else "Name cannot be empty"


QUESTIONS: list[dict[str, Any]] = [
    {
        "type": "select",
        "name": "platform",
        "message": "Select platform:",
        "choices": [Platform.NEXT.value, Platform.EXPO.value, Platform.REACT_NATIVE.value],
    },
    {
        "type": "select",
        "name": "action",
        "message": "What do you want to do?",
        "choices": [Action.ADD.value, Action.REMOVE.value],
    },
    {
        "type": "text",
        "name": "name",
        "message": "Enter component/page name:",
        "validate": validate_component_name,
    },
]


def ask_component_request() -> ComponentRequest:
    """Run the questions in order and return the answers as a request.

    Raises:
        PromptCancelled: If the prompt was interrupted before every question
            was answered.
    """
    answers = questionary.prompt(QUESTIONS)
    if not answers or any(answers.get(q["name"]) is None for q in QUESTIONS):
        raise PromptCancelled("Cancelled")

    return ComponentRequest(
        platform=Platform(answers["platform"]),
        action=Action(answers["action"]),
        name=answers["name"],
    )
