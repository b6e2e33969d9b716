"""
Linguist - AI translation assistant

Provides the request orchestration and local persistence behind the app:
- orchestrator: TranslationService (translate, refine, transcribe, speech, insights)
- gemini: GeminiClient for the remote generateContent API
- audio: VoiceRecorder, PCM decode/encode, playback
- history: ActivityLog, key-value stores, analytics
- ingestion: upload classification and preparation
- export: txt / pdf / doc output

Usage:
    from linguist import ActivityLog, FileKeyValueStore, GeminiClient, TranslationService

    service = TranslationService(GeminiClient(), ActivityLog(FileKeyValueStore("~/.linguist")))
    text = await service.translate_text("namaste", "ne", "en")
"""

from .core import LANGUAGES, ActivityRecord, AnalyticsView, RecordKind, SourceLanguage
from .errors import (
    DeviceAccessError,
    EmptyResponseError,
    LinguistError,
    ReadError,
    RemoteCallError,
    SizeLimitExceeded,
)
from .gemini import GeminiClient
from .history import ActivityLog, FileKeyValueStore, MemoryKeyValueStore, compute_analytics
from .orchestrator import TranslationService
from .utils import setup_logging

__all__ = [
    "LANGUAGES",
    "ActivityLog",
    "ActivityRecord",
    "AnalyticsView",
    "DeviceAccessError",
    "EmptyResponseError",
    "FileKeyValueStore",
    "GeminiClient",
    "LinguistError",
    "MemoryKeyValueStore",
    "ReadError",
    "RecordKind",
    "RemoteCallError",
    "SizeLimitExceeded",
    "SourceLanguage",
    "TranslationService",
    "compute_analytics",
    "setup_logging",
]

__version__ = "1.0.0"
