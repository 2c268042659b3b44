"""
Conversions from live scheduler records into review events.
"""

from datetime import timedelta
from typing import Any, Iterable, List, Mapping, Optional

from fsrs import ReviewLog

from ..core.clock import EPOCH
from ..core.errors import EventFormatError
from ..core.events import FORGOTTEN, ReviewEvent


def from_review_log(log: ReviewLog, item_id: Optional[int] = None) -> ReviewEvent:
    """
    Convert an fsrs ReviewLog into a ReviewEvent.

    Args:
        log: Review log produced by fsrs.Scheduler.review_card
        item_id: Override for the item id (default: log.card_id)
    """
    return ReviewEvent(
        item_id=log.card_id if item_id is None else item_id,
        timestamp=log.review_datetime,
        grade=int(log.rating),
    )


def from_revlog_rows(rows: Iterable[Mapping[str, Any]]) -> List[ReviewEvent]:
    """
    Convert Anki revlog rows into review events.

    Rows need the revlog columns id (ms timestamp), cid, ease, ivl, type, time.

    Rules:
    - manual rescheduling (ease 0 with non-zero ivl) is dropped
    - zero-time cramming entries (type 3 with time 0) are dropped
    - ease 0 otherwise marks a forget
    - order of the rows is kept

    Raises:
        EventFormatError: If a row misses a column or holds a non-integer value
    """
    events = []
    for idx, row in enumerate(rows):
        try:
            ease = int(row["ease"])
            ivl = int(row["ivl"])
            kind = int(row["type"])
            took = int(row["time"])
            ms = int(row["id"])
            cid = int(row["cid"])
        except (KeyError, TypeError, ValueError) as e:
            raise EventFormatError(f"Invalid revlog row {idx}: {e}") from e

        if (ease == 0 and ivl != 0) or (kind == 3 and took == 0):
            continue

        events.append(
            ReviewEvent(
                item_id=cid,
                timestamp=EPOCH + timedelta(milliseconds=ms),
                grade=ease if ease != 0 else FORGOTTEN,
            )
        )
    return events
