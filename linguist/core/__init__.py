"""Core types for Linguist: languages and persisted models."""

from linguist.core.languages import (
    AUTO_CODE,
    LANGUAGES,
    Language,
    SourceLanguage,
    get_language,
    language_name,
)
from linguist.core.models import (
    ActivityRecord,
    AnalyticsView,
    DailyCount,
    LanguageCount,
    RecordKind,
    truncate_preview,
)

__all__ = [
    "AUTO_CODE",
    "LANGUAGES",
    "ActivityRecord",
    "AnalyticsView",
    "DailyCount",
    "Language",
    "LanguageCount",
    "RecordKind",
    "SourceLanguage",
    "get_language",
    "language_name",
    "truncate_preview",
]
