"""
History - local activity log and analytics

Usage:
    from linguist.history import ActivityLog, FileKeyValueStore

    log = ActivityLog(FileKeyValueStore("~/.linguist"))
    view = log.compute_analytics()
"""

from .analytics import WINDOW_DAYS, compute_analytics, daily_window
from .log import ActivityLog
from .store import FileKeyValueStore, KeyValueStore, MemoryKeyValueStore

__all__ = [
    "WINDOW_DAYS",
    "ActivityLog",
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "compute_analytics",
    "daily_window",
]
