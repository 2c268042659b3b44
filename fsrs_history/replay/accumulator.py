"""
Retention accumulator: per-day summed retrievability.
"""

from typing import List

from ..core.events import RangeBounds
from ..model.base import MemoryModel


class RetentionAccumulator:
    """
    Dense per-day retrievability sums, indexed from start_day.

    Each add_range() call adds model.forgetting_curve(day - from_day, stability)
    to every day in the range. Days nothing touched stay 0.0.
    """

    def __init__(self, start_day: int) -> None:
        self.start_day = start_day
        self._slots: List[float] = []

    def extend_to(self, day: int) -> None:
        """Make sure every day up to and including day has a slot."""
        needed = day - self.start_day + 1
        if needed > len(self._slots):
            self._slots.extend([0.0] * (needed - len(self._slots)))

    def add_range(self, model: MemoryModel, stability: float, bounds: RangeBounds) -> None:
        """
        Accumulate the forgetting curve over [from_day, to_day).

        Days before start_day (only possible with an unsorted log) are dropped.
        """
        if not len(bounds):
            return
        self.extend_to(bounds.to_day - 1)
        for day in bounds.days():
            offset = day - self.start_day
            if offset < 0:
                continue
            self._slots[offset] += model.forgetting_curve(day - bounds.from_day, stability)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, day: int) -> float:
        offset = day - self.start_day
        if 0 <= offset < len(self._slots):
            return self._slots[offset]
        return 0.0

    def to_list(self) -> List[float]:
        return list(self._slots)
