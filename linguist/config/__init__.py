"""
Linguist Configuration Module

Centralized model definitions and environment settings.
"""

from .settings import (
    DOCUMENT_PREVIEW_CHARS,
    GEMINI_API_KEY,
    GEMINI_BASE_URL,
    GEMINI_TIMEOUT,
    HISTORY_DIR,
    MAX_UPLOAD_BYTES,
    MODELS,
    PDF_FONT_CANDIDATES,
    PDF_FONTS,
    PDF_TEXT_SHAPING,
    STORAGE_KEY,
    TTS_CHANNELS,
    TTS_SAMPLE_RATE,
    TTS_VOICE,
    get_model,
    get_model_config,
    list_models,
)

__all__ = [
    "DOCUMENT_PREVIEW_CHARS",
    "GEMINI_API_KEY",
    "GEMINI_BASE_URL",
    "GEMINI_TIMEOUT",
    "HISTORY_DIR",
    "MAX_UPLOAD_BYTES",
    "MODELS",
    "PDF_FONT_CANDIDATES",
    "PDF_FONTS",
    "PDF_TEXT_SHAPING",
    "STORAGE_KEY",
    "TTS_CHANNELS",
    "TTS_SAMPLE_RATE",
    "TTS_VOICE",
    "get_model",
    "get_model_config",
    "list_models",
]
