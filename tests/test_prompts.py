"""
Tests for the prompt builder
"""

from slidecraft.schemas.session import InputKind, Language
from slidecraft.services.prompts import (
    DOCUMENT_SYSTEM_PROMPT,
    RESPONSE_SCHEMA,
    YOUTUBE_SYSTEM_PROMPT,
    build_prompt,
)


class TestBuildPrompt:

    def test_transcript_in_russian(self):
        bundle = build_prompt("hi everyone, welcome back", Language.RU, InputKind.YOUTUBE)

        assert "Russian" in bundle.user_prompt
        assert bundle.system_instruction == YOUTUBE_SYSTEM_PROMPT
        assert bundle.system_instruction != DOCUMENT_SYSTEM_PROMPT

    def test_document_in_uzbek(self):
        bundle = build_prompt("Annual report", Language.UZ, InputKind.DOCUMENT)

        assert bundle.system_instruction == DOCUMENT_SYSTEM_PROMPT
        assert bundle.user_prompt.startswith("Generate a professional presentation")
        assert "Uzbek" in bundle.user_prompt

    def test_accepts_plain_string_tags(self):
        bundle = build_prompt("x", "EN", "youtube")

        assert "English" in bundle.user_prompt
        assert bundle.system_instruction == YOUTUBE_SYSTEM_PROMPT

    def test_text_embedded_verbatim(self):
        text = "  <b>Line one</b>\n\nLine two with `code` and {braces}  " + "x" * 50_000
        bundle = build_prompt(text, Language.EN, InputKind.DOCUMENT)

        assert bundle.user_prompt.endswith(text)

    def test_schema_requires_title_and_slides(self):
        bundle = build_prompt("x", Language.EN, InputKind.DOCUMENT)
        schema = bundle.response_schema

        assert schema is RESPONSE_SCHEMA
        assert schema["required"] == ["title", "slides"]
        slide = schema["properties"]["slides"]["items"]
        assert slide["required"] == ["title", "bullets"]
        assert slide["properties"]["bullets"]["items"] == {"type": "string"}
