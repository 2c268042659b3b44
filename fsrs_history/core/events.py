"""
Review event model for historical replay.

Review events are immutable records of a single review (or reset) of an item.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from fsrs import Rating

# Sentinel grade for a manual reset of the item ("forget").
FORGOTTEN = -1

Grade = Union[Rating, int]


@dataclass(frozen=True)
class ReviewEvent:
    """
    Immutable review record.

    Fields:
        item_id: Identifier of the reviewed item (e.g. a flashcard id)
        timestamp: Instant at which the review was transacted
        grade: Rating value (1-4) or FORGOTTEN for a reset
    """
    item_id: int
    timestamp: datetime
    grade: Grade

    @property
    def is_forget(self) -> bool:
        return self.grade == FORGOTTEN

    def rating(self) -> Rating:
        """
        Get the grade as an fsrs Rating.

        Raises:
            ValueError: If this is a forget event or the grade is out of range
        """
        if self.is_forget:
            raise ValueError(f"Forget event for item {self.item_id} has no rating")
        return Rating(int(self.grade))


@dataclass(frozen=True)
class RangeBounds:
    """
    Half-open range of day indices [from_day, to_day).

    A range with from_day >= to_day covers no days.
    """
    from_day: int
    to_day: int

    def days(self) -> range:
        return range(self.from_day, self.to_day)

    def __len__(self) -> int:
        return max(0, self.to_day - self.from_day)
