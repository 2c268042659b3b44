"""
File-based review log using JSONL format.

Each line holds one review event:
    {"item_id": 1, "timestamp": "2024-01-01T08:00:00+00:00", "grade": 3}

timestamp may also be an integer number of milliseconds since the epoch.
grade -1 marks a forget.
"""

import json
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Iterator, List

from ..core.canonical import canonical_json_str
from ..core.clock import EPOCH
from ..core.errors import EventFormatError
from ..core.events import ReviewEvent


def event_to_record(event: ReviewEvent) -> Dict[str, Any]:
    return {
        "item_id": event.item_id,
        "timestamp": event.timestamp.isoformat(),
        "grade": int(event.grade),
    }


def event_from_record(rec: Dict[str, Any]) -> ReviewEvent:
    """
    Parse one JSONL record.

    Raises:
        EventFormatError: If a field is missing or malformed
    """
    try:
        raw_ts = rec["timestamp"]
        if isinstance(raw_ts, (int, float)) and not isinstance(raw_ts, bool):
            ts = EPOCH + timedelta(milliseconds=int(raw_ts))
        else:
            ts = datetime.fromisoformat(str(raw_ts))
            if ts.tzinfo is None:
                ts = ts.replace(tzinfo=timezone.utc)
        return ReviewEvent(item_id=int(rec["item_id"]), timestamp=ts, grade=int(rec["grade"]))
    except (KeyError, TypeError, ValueError) as e:
        raise EventFormatError(f"Invalid review record {rec!r}: {e}") from e


class ReviewLogFile:
    """
    Append-only JSONL review log.

    Guarantees:
    - Append-only (no mutations)
    - Fsync after each append
    - Records read back in file order
    """

    def __init__(self, path: str) -> None:
        self.path = path

    def append(self, event: ReviewEvent) -> None:
        self.extend([event])

    def extend(self, events: Iterable[ReviewEvent]) -> None:
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            for event in events:
                f.write(canonical_json_str(event_to_record(event)) + "\n")
            f.flush()
            os.fsync(f.fileno())

    def read(self) -> Iterator[ReviewEvent]:
        """
        Yield events in file order. Blank lines are skipped.

        Raises:
            FileNotFoundError: If the log does not exist
            EventFormatError: If a line is not a valid record
        """
        with open(self.path, "r", encoding="utf-8") as f:
            for lineno, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    rec = json.loads(line)
                except json.JSONDecodeError as e:
                    raise EventFormatError(f"{self.path}:{lineno}: {e}") from e
                if not isinstance(rec, dict):
                    raise EventFormatError(f"{self.path}:{lineno}: expected an object")
                yield event_from_record(rec)

    def read_all(self) -> List[ReviewEvent]:
        return list(self.read())
