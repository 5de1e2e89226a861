"""Unit tests for the interactive prompt (druta.prompt).

The questionary prompt is patched so the tests never wait on a terminal.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from druta.prompt import (
    QUESTIONS,
    PromptCancelled,
    ask_component_request,
    validate_component_name,
)
from druta.scaffolder.models import Action, Platform

pytestmark = pytest.mark.unit


class TestValidateComponentName:
    def test_accepts_name(self):
        assert validate_component_name("login") is True

    def test_accepts_name_with_spaces(self):
        assert validate_component_name(" my page ") is True

    @pytest.mark.parametrize("value", ["", " ", "\t"])
    def test_rejects_blank(self, value: str):
        assert validate_component_name(value) == "Name cannot be empty"


class TestQuestions:
    def test_question_order(self):
        assert [q["name"] for q in QUESTIONS] == ["platform", "action", "name"]

    def test_platform_choices(self):
        assert QUESTIONS[0]["type"] == "select"
        assert QUESTIONS[0]["choices"] == ["next", "expo", "react-native"]

    def test_action_choices(self):
        assert QUESTIONS[1]["type"] == "select"
        assert QUESTIONS[1]["choices"] == ["add", "remove"]

    def test_name_question_validates(self):
        assert QUESTIONS[2]["type"] == "text"
        assert QUESTIONS[2]["validate"] is validate_component_name


class TestAskComponentRequest:
    def test_returns_request(self):
        answers = {"platform": "react-native", "action": "remove", "name": "profile"}
        with patch("druta.prompt.questionary.prompt", return_value=answers) as mock_prompt:
            request = ask_component_request()

        mock_prompt.assert_called_once_with(QUESTIONS)
        assert request.platform is Platform.REACT_NATIVE
        assert request.action is Action.REMOVE
        assert request.name == "profile"

    def test_interrupted_prompt_raises(self):
        # questionary.prompt returns an empty dict on Ctrl-C
        with patch("druta.prompt.questionary.prompt", return_value={}):
            with pytest.raises(PromptCancelled, match="Cancelled"):
                ask_component_request()

    def test_partial_answers_raise(self):
        with patch("druta.prompt.questionary.prompt", return_value={"platform": "next"}):
            with pytest.raises(PromptCancelled):
                ask_component_request()
