"""
Shared fixtures for replay tests.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fsrs_history.core.events import Grade, ReviewEvent
from fsrs_history.core.state import MemoryState
from fsrs_history.model.base import MemoryModel

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(day: int, hours: float = 0) -> datetime:
    """Instant `day` days (plus hours) after T0."""
    return T0 + timedelta(days=day, hours=hours)


def review(item_id: int, day: int, grade: Grade = 3, hours: float = 0) -> ReviewEvent:
    return ReviewEvent(item_id=item_id, timestamp=at(day, hours), grade=grade)


class ScalingModel(MemoryModel):
    """
    Simple exact model: stability multiplies by the grade, recall halves
    every `stability` days.
    """

    def __init__(self, initial: float = 1.0) -> None:
        self.initial = initial
        self.calls = []

    def next_state(self, state: Optional[MemoryState], elapsed_days: int, grade: Grade) -> MemoryState:
        self.calls.append((state, elapsed_days, int(grade)))
        base = state.stability if state is not None else self.initial
        return MemoryState(stability=base * int(grade), difficulty=float(grade))

    def forgetting_curve(self, elapsed_days: int, stability: float) -> float:
        return 0.5 ** (elapsed_days / stability)
