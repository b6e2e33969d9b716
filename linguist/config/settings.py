"""
Settings

Single source of truth for remote model, storage and upload configuration.
Values come from the environment so the CLI and tests can override them.

Architecture:
- MODELS: one entry per task, each pointing at a Gemini model
- Storage: history is a JSON blob under LINGUIST_HISTORY_DIR
"""

import os
from pathlib import Path
from typing import Any

# ============== Remote Model ==============
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
GEMINI_BASE_URL = os.getenv(
    "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
)
GEMINI_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60.0"))

# Per-task model definitions
MODELS: dict[str, dict[str, Any]] = {
    "translate": {
        "model": os.getenv("GEMINI_TRANSLATE_MODEL", "gemini-2.5-flash"),
        "description": "Text and document translation",
    },
    "refine": {
        "model": os.getenv("GEMINI_REFINE_MODEL", "gemini-2.5-flash"),
        "description": "Fast editing: polish, formal, casual, summarize",
    },
    "transcribe": {
        "model": os.getenv("GEMINI_TRANSCRIBE_MODEL", "gemini-2.5-flash"),
        "description": "Verbatim speech transcription",
    },
    "speech": {
        "model": os.getenv("GEMINI_SPEECH_MODEL", "gemini-2.5-flash-preview-tts"),
        "description": "Text-to-speech (experimental model)",
    },
    "insights": {
        "model": os.getenv("GEMINI_INSIGHTS_MODEL", "gemini-3-pro-preview"),
        "description": "Usage analysis, slower reasoning model",
    },
}

# ============== Speech Output ==============
# The TTS model always returns 16-bit PCM, 24kHz mono
TTS_VOICE = os.getenv("TTS_VOICE", "Kore")
TTS_SAMPLE_RATE = 24000
TTS_CHANNELS = 1

# ============== Storage ==============
HISTORY_DIR = Path(os.getenv("LINGUIST_HISTORY_DIR", str(Path.home() / ".linguist")))
STORAGE_KEY = os.getenv("LINGUIST_STORAGE_KEY", "linguistai_history")
DOCUMENT_PREVIEW_CHARS = 100

# ============== Uploads ==============
MAX_UPLOAD_BYTES = int(float(os.getenv("LINGUIST_MAX_UPLOAD_MB", "5")) * 1024 * 1024)

# ============== Export ==============
# TTF fonts used for PDF export, first match is primary and the rest are
# fallbacks for glyphs it lacks. LINGUIST_PDF_FONTS (os.pathsep separated)
# replaces the system search list.
PDF_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansDevanagari-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSansSinhala-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/Library/Fonts/Arial Unicode.ttf",
    "C:/Windows/Fonts/Nirmala.ttf",
    "C:/Windows/Fonts/arialuni.ttf",
]
PDF_FONTS = [p for p in os.getenv("LINGUIST_PDF_FONTS", "").split(os.pathsep) if p]
# Complex-script shaping needs uharfbuzz (pip install "linguist[shaping]")
PDF_TEXT_SHAPING = os.getenv("LINGUIST_PDF_SHAPING", "0").lower() in ("1", "true", "yes")


def get_model_config(task: str) -> dict[str, Any]:
    """
    Get configuration for a task.

    Args:
        task: Task name ('translate', 'refine', 'transcribe', 'speech', 'insights').

    Returns:
        Model configuration dictionary.

    Raises:
        KeyError: If task name is not found.
    """
    if task not in MODELS:
        raise KeyError(f"Unknown task: {task}. Available: {list(MODELS.keys())}")
    return MODELS[task]


def get_model(task: str) -> str:
    """Get the Gemini model name used for a task."""
    return get_model_config(task)["model"]


def list_models() -> dict[str, str]:
    """
    List all tasks with their model names.

    Returns:
        Dict mapping task name to model name.
    """
    return {task: cfg["model"] for task, cfg in MODELS.items()}
