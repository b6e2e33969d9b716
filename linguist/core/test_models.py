"""Unit tests for persisted and derived models."""

import pytest
from pydantic import ValidationError

from .models import ActivityRecord, AnalyticsView, DailyCount, RecordKind, truncate_preview

STORED = {
    "id": "abc",
    "sourceText": "Good morning",
    "translatedText": "शुभ प्रभात",
    "sourceLang": "en",
    "targetLang": "ne",
    "timestamp": 1710000000000,
    "type": "voice",
}


class TestActivityRecord:
    def test_loads_camel_case(self):
        record = ActivityRecord.model_validate(STORED)

        assert record.source_text == "Good morning"
        assert record.kind is RecordKind.VOICE
        assert record.timestamp == 1710000000000

    def test_to_storage_uses_aliases(self):
        assert ActivityRecord.model_validate(STORED).to_storage() == STORED

    def test_frozen(self):
        record = ActivityRecord.model_validate(STORED)
        with pytest.raises(ValidationError):
            record.source_text = "changed"

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            ActivityRecord.model_validate({**STORED, "type": "video"})

    @pytest.mark.parametrize("term,expected", [("MORNING", True), ("प्रभात", True), ("night", False)])
    def test_matches(self, term, expected):
        assert ActivityRecord.model_validate(STORED).matches(term) is expected


class TestAnalyticsView:
    def test_defaults(self):
        view = AnalyticsView()
        assert view.total_count == 0
        assert view.active_languages == 0
        assert view.average_daily == 0

    def test_average_daily_rounds(self):
        days = [DailyCount(date=f"2024-01-0{i}", count=c) for i, c in enumerate([3, 0, 1, 0, 0, 0, 0], 1)]
        assert AnalyticsView(daily_activity=days).average_daily == 1


def test_truncate_preview_always_appends_ellipsis():
    assert truncate_preview("short", 100) == "short..."
    assert truncate_preview("x" * 150, 100) == "x" * 100 + "..."
