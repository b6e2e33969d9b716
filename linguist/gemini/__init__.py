"""
Gemini - remote model capability

Single-shot generateContent calls over httpx plus the prompt templates used
by the orchestrator.

Usage:
    from linguist.gemini import GeminiClient

    client = GeminiClient()
    text = await client.generate_text("Translate ...")
    await client.close()
"""

from .client import GeminiClient, extract_inline_data, extract_text
from .prompts import REFINE_INSTRUCTIONS, RefineMode

__all__ = [
    "REFINE_INSTRUCTIONS",
    "GeminiClient",
    "RefineMode",
    "extract_inline_data",
    "extract_text",
]
