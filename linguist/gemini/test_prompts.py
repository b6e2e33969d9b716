"""Unit tests for prompt templates."""

import pytest

from .prompts import (
    AUTO_DETECT_INSTRUCTION,
    REFINE_INSTRUCTIONS,
    TRANSCRIBE_INSTRUCTION,
    insights_prompt,
    refine_prompt,
    translate_binary_instruction,
    translate_document_prompt,
    translate_text_prompt,
)


class TestTranslatePrompts:
    def test_text_prompt_names_languages(self):
        prompt = translate_text_prompt("namaste", "Nepali", "English")
        assert "from Nepali to English" in prompt
        assert 'Text: "namaste"' in prompt
        assert "ONLY the translated text" in prompt

    def test_text_prompt_auto(self):
        prompt = translate_text_prompt("hola", None, "English")
        assert "detect the source language" in prompt
        assert "from None" not in prompt

    def test_document_prompt_named(self):
        prompt = translate_document_prompt("Para 1\n\nPara 2", "Spanish", "Nepali")
        assert "from Spanish to Nepali" in prompt
        assert "structure/paragraphs" in prompt
        assert prompt.endswith("Para 1\n\nPara 2")

    def test_document_prompt_auto_detect(self):
        """Auto sentinel asks for detection instead of naming a language."""
        prompt = translate_document_prompt("text", None, "Nepali")
        assert AUTO_DETECT_INSTRUCTION in prompt
        assert "from " not in prompt.split("to Nepali")[0]

    def test_binary_instruction(self):
        instruction = translate_binary_instruction("Sinhala")
        assert "Sinhala" in instruction
        assert "Detect the source language" in instruction


class TestRefinePrompt:
    @pytest.mark.parametrize("mode", ["polish", "formal", "casual", "summarize"])
    def test_each_mode_has_template(self, mode):
        prompt = refine_prompt("some text", mode)
        assert prompt.startswith(REFINE_INSTRUCTIONS[mode])
        assert prompt.endswith('"some text"')

    def test_summarize_keeps_language(self):
        assert "same language" in REFINE_INSTRUCTIONS["summarize"]

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown refine mode"):
            refine_prompt("text", "shout")


def test_transcribe_instruction_is_verbatim():
    assert "exactly as it is" in TRANSCRIBE_INSTRUCTION


def test_insights_prompt_embeds_data():
    prompt = insights_prompt({"total_count": 3, "language": "Nepali"})
    assert '"total_count": 3' in prompt
    assert "3 short, actionable" in prompt
