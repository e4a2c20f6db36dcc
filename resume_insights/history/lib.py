"""Resume history loading and summaries.

Handles the history payload returned by the resume API: validation into
records, dashboard statistics, and the search and sort used by the history
list.
"""

import json
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from resume_insights.config import get_recent_limit
from resume_insights.core.log import get_logger
from resume_insights.history.models import (
    DashboardStats,
    HistoryFormatError,
    ResumeRecord,
    SortKey,
    SortOrder,
)

logger = get_logger(__name__)

MISSING_SCORE_RANK = -1.0


def load_history(payload: Any) -> list[ResumeRecord]:
    """Validate a history payload into records.

    Args:
        payload: API envelope ``{"history": [...]}`` or a bare list.

    Returns:
        Records in delivery order.

    Raises:
        HistoryFormatError: If the payload shape is wrong or a record is invalid.
    """
    if isinstance(payload, dict) and "history" in payload:
        items = payload["history"]
    else:
        items = payload

    if not isinstance(items, list):
        raise HistoryFormatError(
            f"Expected a list of records, got {type(items).__name__}"
        )

    records: list[ResumeRecord] = []
    for index, item in enumerate(items):
        try:
            records.append(ResumeRecord.model_validate(item))
        except ValidationError as e:
            raise HistoryFormatError(
                f"Invalid record at index {index}: {e.error_count()} error(s)",
                index=index,
            ) from e

    logger.debug("Loaded %d history records", len(records))
    return records


def load_history_file(path: Path | str) -> list[ResumeRecord]:
    """Load a history export from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        HistoryFormatError: If the file is not UTF-8 JSON or has the wrong shape.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise HistoryFormatError(f"{path} is not valid UTF-8: {e}") from e
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise HistoryFormatError(f"{path} is not valid JSON: {e}") from e
    return load_history(payload)


def find_record(records: Iterable[ResumeRecord], record_id: str) -> ResumeRecord | None:
    """Find a record by id."""
    return next((record for record in records if record.id == record_id), None)


def dashboard_stats(
    records: list[ResumeRecord], recent_limit: int | None = None
) -> DashboardStats:
    """Compute dashboard statistics.

    Args:
        records: History records in delivery order (newest first).
        recent_limit: Number of recent uploads. Defaults to configuration.

    Returns:
        DashboardStats with total, average score and recent uploads.
    """
    limit = get_recent_limit(recent_limit)
    scores = [r.ats_score for r in records if r.ats_score is not None]
    average = f"{sum(scores) / len(scores):.1f}" if scores else "N/A"

    return DashboardStats(
        total_resumes=len(records),
        average_score=average,
        recent_uploads=list(records[: max(limit, 0)]),
    )


def search_records(records: Iterable[ResumeRecord], term: str) -> list[ResumeRecord]:
    """Filter records whose file name or job role contains term.

    Matching is case-insensitive; an empty term keeps every record.
    """
    needle = term.lower()
    return [
        record
        for record in records
        if needle in record.file_name.lower() or needle in record.job_role.lower()
    ]


def _sort_value(record: ResumeRecord, sort_by: SortKey) -> Any:
    if sort_by is SortKey.DATE:
        return record.created_at.timestamp() if record.created_at else float("-inf")
    if sort_by is SortKey.SCORE:
        return record.ats_score if record.ats_score is not None else MISSING_SCORE_RANK
    return record.file_name.casefold()


def sort_records(
    records: Iterable[ResumeRecord],
    sort_by: SortKey | str = SortKey.DATE,
    order: SortOrder | str = SortOrder.DESC,
) -> list[ResumeRecord]:
    """Sort records for the history list.

    Records without a score rank below every scored record; records without
    a date rank oldest. Ties keep their delivery order.

    Args:
        records: Records to sort.
        sort_by: Field to sort by.
        order: Sort direction.

    Returns:
        New sorted list.

    Raises:
        ValueError: If sort_by or order is not a known value.
    """
    sort_by = SortKey(sort_by)
    order = SortOrder(order)
    return sorted(
        records,
        key=lambda record: _sort_value(record, sort_by),
        reverse=order is SortOrder.DESC,
    )
