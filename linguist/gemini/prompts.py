"""Prompt templates for each remote-model task."""

import json
from typing import Any, Literal

RefineMode = Literal["polish", "formal", "casual", "summarize"]

REFINE_INSTRUCTIONS: dict[str, str] = {
    "polish": (
        "Polish the following text to improve fluency, grammar, and vocabulary, "
        "keeping the meaning intact. Return only the polished text:"
    ),
    "formal": (
        "Rewrite the following text to be more formal and professional. "
        "Return only the rewritten text:"
    ),
    "casual": (
        "Rewrite the following text to be more casual and conversational. "
        "Return only the rewritten text:"
    ),
    "summarize": (
        "Summarize the following text concisely in the same language as the text:"
    ),
}

TRANSCRIBE_INSTRUCTION = (
    "Transcribe the spoken language in this audio exactly as it is. "
    "Return only the transcription text."
)

AUTO_DETECT_INSTRUCTION = "Detect the source language automatically"


def translate_text_prompt(text: str, source_name: str | None, target_name: str) -> str:
    """Short-text translation. source_name=None lets the model detect it."""
    source = f"from {source_name} " if source_name else "(detect the source language) "
    return f"""Translate the following text {source}to {target_name}.
Preserve meaning, correct grammar, and avoid literal translations.
Return ONLY the translated text, no preamble or markdown formatting.

Text: "{text}\""""


def translate_document_prompt(content: str, source_name: str | None, target_name: str) -> str:
    """Document translation keeping paragraph structure."""
    source_instruction = f"from {source_name}" if source_name else AUTO_DETECT_INSTRUCTION
    return f"""Translate the following document content {source_instruction} to {target_name}.
Maintain the original structure/paragraphs as much as possible.
Return ONLY the translated content, no commentary.

Document Content:
{content}"""


def translate_binary_instruction(target_name: str) -> str:
    """Instruction sent alongside an inline image or document."""
    return (
        f"Extract all text from this file and translate it to {target_name}. "
        "Detect the source language automatically. "
        "Maintain the original structure/paragraphs as much as possible. "
        "Return ONLY the translated text, no commentary."
    )


def refine_prompt(text: str, mode: str) -> str:
    """
    Build a refinement prompt.

    Raises:
        ValueError: If mode is not one of polish, formal, casual, summarize.
    """
    if mode not in REFINE_INSTRUCTIONS:
        raise ValueError(f"Unknown refine mode: {mode}. Available: {list(REFINE_INSTRUCTIONS)}")
    return f'{REFINE_INSTRUCTIONS[mode]}\n\n"{text}"'


def insights_prompt(data: dict[str, Any]) -> str:
    """Ask for short strategic insights on usage data."""
    return f"""Analyze the following translation app usage data and provide 3 short, actionable strategic insights or interesting trends. Format the output as a simple list.

Data: {json.dumps(data, ensure_ascii=False)}"""
