"""
Review log ingestion.

This module provides:
- ReviewLogFile: JSONL storage of review events
- from_review_log: fsrs ReviewLog -> ReviewEvent
- from_revlog_rows: Anki revlog rows -> ReviewEvents
"""

from .convert import from_review_log, from_revlog_rows
from .file_store import ReviewLogFile, event_from_record, event_to_record

__all__ = [
    "ReviewLogFile",
    "event_from_record",
    "event_to_record",
    "from_review_log",
    "from_revlog_rows",
]
