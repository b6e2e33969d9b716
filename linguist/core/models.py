"""
Shared Models

Data structures persisted in the activity log and returned by analytics.

Persisted format:
- The log is a JSON list of records using camelCase keys
  {"id", "sourceText", "translatedText", "sourceLang", "targetLang", "timestamp", "type"}
- Analytics views are derived on demand and never stored
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordKind(str, Enum):
    """Modality of a logged operation."""

    TEXT = "text"
    DOCUMENT = "document"
    VOICE = "voice"


class ActivityRecord(BaseModel):
    """One completed operation. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)

    id: str
    source_text: str = Field(alias="sourceText")
    translated_text: str = Field(alias="translatedText")
    source_lang: str = Field(alias="sourceLang")
    target_lang: str = Field(alias="targetLang")
    timestamp: int  # ms since epoch
    kind: RecordKind = Field(alias="type")

    def to_storage(self) -> dict:
        """Serialize with camelCase keys for the persisted blob."""
        return self.model_dump(mode="json", by_alias=True)

    def matches(self, term: str) -> bool:
        """Case-insensitive search over source and translated text."""
        needle = term.lower()
        return needle in self.source_text.lower() or needle in self.translated_text.lower()


class LanguageCount(BaseModel):
    """Number of records per target language display name."""

    name: str
    count: int


class DailyCount(BaseModel):
    """Number of records on one calendar day (YYYY-MM-DD)."""

    date: str
    count: int


class AnalyticsView(BaseModel):
    """Aggregates computed from the full activity log."""

    total_count: int = 0
    language_distribution: list[LanguageCount] = []
    daily_activity: list[DailyCount] = []

    @property
    def active_languages(self) -> int:
        return len(self.language_distribution)

    @property
    def average_daily(self) -> int:
        """Rounded mean over the daily window."""
        if not self.daily_activity:
            return 0
        total = sum(day.count for day in self.daily_activity)
        return round(total / len(self.daily_activity))


def truncate_preview(text: str, limit: int) -> str:
    """Bounded prefix stored for document-class records."""
    return text[:limit] + "..."


__all__ = [
    "ActivityRecord",
    "AnalyticsView",
    "DailyCount",
    "LanguageCount",
    "RecordKind",
    "truncate_preview",
]
