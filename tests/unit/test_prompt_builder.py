"""Tests for instruction selection and request assembly."""

from meetsynth.services.classifier import GENERAL, MEETING, RESUME
from meetsynth.services.prompt_builder import (
    GENERAL_DEFAULT_INSTRUCTIONS,
    MEETING_DEFAULT_INSTRUCTIONS,
    RESUME_INSTRUCTIONS,
    SYSTEM_PROMPT,
    build_instructions,
    build_request,
)


class TestBuildInstructions:
    def test_resume_ignores_user_instructions(self):
        assert build_instructions(RESUME, "Write a haiku") == RESUME_INSTRUCTIONS

    def test_resume_with_empty_instructions(self):
        assert build_instructions(RESUME, "") == RESUME_INSTRUCTIONS

    def test_meeting_uses_user_instructions(self):
        assert build_instructions(MEETING, "List decisions only") == "List decisions only"

    def test_meeting_default_when_empty(self):
        assert build_instructions(MEETING, "") == MEETING_DEFAULT_INSTRUCTIONS
        assert "actionable bullet points" in MEETING_DEFAULT_INSTRUCTIONS

    def test_general_uses_user_instructions(self):
        assert build_instructions(GENERAL, "Two sentences") == "Two sentences"

    def test_general_default_when_empty(self):
        assert build_instructions(GENERAL, "") == GENERAL_DEFAULT_INSTRUCTIONS
        assert "comprehensive summary" in GENERAL_DEFAULT_INSTRUCTIONS

    def test_whitespace_only_counts_as_empty(self):
        assert build_instructions(GENERAL, "   \n") == GENERAL_DEFAULT_INSTRUCTIONS

    def test_none_counts_as_empty(self):
        assert build_instructions(MEETING, None) == MEETING_DEFAULT_INSTRUCTIONS

    def test_user_instructions_are_stripped(self):
        assert build_instructions(GENERAL, "  Be brief  ") == "Be brief"


class TestBuildRequest:
    def test_request_embeds_text_and_instructions(self):
        request = build_request("The quarterly numbers.", GENERAL, "Be brief")

        assert request.system_prompt == SYSTEM_PROMPT
        assert "professional summarizer" in request.system_prompt
        assert "The quarterly numbers." in request.user_prompt
        assert "Be brief" in request.user_prompt
        assert request.instructions == "Be brief"
        assert request.document_type == GENERAL

    def test_messages_format(self):
        request = build_request("Body", MEETING, "")
        assert request.messages == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": request.user_prompt},
        ]

    def test_braces_in_text_are_kept_verbatim(self):
        request = build_request("config = {key: value}", GENERAL, "")
        assert "config = {key: value}" in request.user_prompt

    def test_template_is_stable(self):
        first = build_request("Same text.", GENERAL, "Same ask")
        second = build_request("Same text.", GENERAL, "Same ask")
        assert first == second
