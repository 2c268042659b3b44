"""
Day clock for historical replay.

Maps instants to integer day indices, honouring a day rollover offset.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

DAY_MS = 24 * 60 * 60 * 1000
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_ms(ts: datetime) -> int:
    """
    Exact milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return (ts - EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True)
class DayClock:
    """
    Deterministic day bucketing.

    rollover_ms is the number of milliseconds after midnight (UTC) at which a
    new day starts. An instant exactly on the rollover belongs to the new day.
    """
    rollover_ms: int = 0

    def day_index(self, ts: datetime) -> int:
        """floor((epoch_ms - rollover_ms) / DAY_MS)"""
        return (to_epoch_ms(ts) - self.rollover_ms) // DAY_MS

    def days_between(self, earlier: datetime, later: datetime) -> int:
        """Whole calendar days between two instants, after rollover."""
        return self.day_index(later) - self.day_index(earlier)
