"""
Memory state model for historical replay.

MemoryState is the reconstructed recall strength of one item.
ReplayResult is the complete output of one replay call.
"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional

from .clock import EPOCH


@dataclass(frozen=True)
class MemoryState:
    """
    Immutable memory state of a single item.

    Fields:
        stability: Time scale of recall decay in days (0.0 = no memory)
        difficulty: Model difficulty of the item (0.0 = no memory)
        last_review: Instant of the last normal review, None if never reviewed

    The replay replaces an item's state on every event instead of mutating it,
    so snapshots handed to hooks or returned to callers never change.
    """
    stability: float = 0.0
    difficulty: float = 0.0
    last_review: Optional[datetime] = None

    @property
    def has_memory(self) -> bool:
        """True when the state carries a learned stability (not empty or reset)."""
        return bool(self.stability)

    def reviewed_at(self, timestamp: datetime) -> "MemoryState":
        return replace(self, last_review=timestamp)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stability": self.stability,
            "difficulty": self.difficulty,
            "last_review": self.last_review.isoformat() if self.last_review else None,
        }


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of a historical replay.

    Fields:
        retention_by_day: Summed retrievability per day; index 0 is start_day
        final_states: Item id -> MemoryState when the replay finished
        start_day: Day index of the first event
        end_day: Day index of the end of the analysis window (inclusive)
    """
    retention_by_day: List[float]
    final_states: Dict[int, MemoryState] = field(default_factory=dict)
    start_day: int = 0
    end_day: int = 0

    def retention_on(self, day: int) -> float:
        """Retention sum for an absolute day index (0.0 outside the series)."""
        offset = day - self.start_day
        if 0 <= offset < len(self.retention_by_day):
            return self.retention_by_day[offset]
        return 0.0

    def day_dates(self) -> List[date]:
        """Calendar date of every slot in retention_by_day."""
        return [
            (EPOCH + timedelta(days=self.start_day + i)).date()
            for i in range(len(self.retention_by_day))
        ]
