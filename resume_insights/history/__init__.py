"""Resume history records and dashboard summaries."""

from resume_insights.history.lib import (
    dashboard_stats,
    find_record,
    load_history,
    load_history_file,
    search_records,
    sort_records,
)
from resume_insights.history.models import (
    DashboardStats,
    HistoryFormatError,
    ResumeRecord,
    SortKey,
    SortOrder,
)

__all__ = [
    # Models
    "DashboardStats",
    "HistoryFormatError",
    "ResumeRecord",
    "SortKey",
    "SortOrder",
    # Operations
    "dashboard_stats",
    "find_record",
    "load_history",
    "load_history_file",
    "search_records",
    "sort_records",
]
