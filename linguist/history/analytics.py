"""Usage analytics derived from the activity log."""

from collections import OrderedDict
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from linguist.core.languages import language_name
from linguist.core.models import ActivityRecord, AnalyticsView, DailyCount, LanguageCount

WINDOW_DAYS = 7


def _utc_day(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).strftime("%Y-%m-%d")


def daily_window(now: datetime | None = None, days: int = WINDOW_DAYS) -> list[str]:
    """
    Calendar days (UTC, YYYY-MM-DD) ending today, oldest first.

    Args:
        now: Reference time. Naive datetimes are treated as UTC.
        days: Window length.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    today = now.astimezone(timezone.utc).date()
    return [(today - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def compute_analytics(
    records: Iterable[ActivityRecord], now: datetime | None = None
) -> AnalyticsView:
    """
    Single pass over the log.

    Language distribution is keyed by the display name of the target language;
    daily activity always covers the last WINDOW_DAYS days, zero-filled.
    """
    language_counts: dict[str, int] = {}
    days: OrderedDict[str, int] = OrderedDict((day, 0) for day in daily_window(now))
    total = 0

    for record in records:
        total += 1
        name = language_name(record.target_lang)
        language_counts[name] = language_counts.get(name, 0) + 1

        day = _utc_day(record.timestamp)
        if day in days:
            days[day] += 1

    return AnalyticsView(
        total_count=total,
        language_distribution=[
            LanguageCount(name=name, count=count) for name, count in language_counts.items()
        ],
        daily_activity=[DailyCount(date=day, count=count) for day, count in days.items()],
    )
