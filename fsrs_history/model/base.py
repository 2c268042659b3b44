"""
MemoryModel abstract interface.

Defines the contract between the replay and the memory model that supplies
state transitions and the forgetting curve.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from ..core.events import Grade
from ..core.state import MemoryState


class MemoryModel(ABC):
    """
    Abstract memory model.

    All implementations must be deterministic: the same arguments always
    produce the same result.
    """

    @abstractmethod
    def next_state(
        self, state: Optional[MemoryState], elapsed_days: int, grade: Grade
    ) -> MemoryState:
        """
        Compute the memory state after a review.

        Args:
            state: Memory before the review (None for a first or post-reset review)
            elapsed_days: Whole days since the previous review
            grade: Rating of the review

        Returns:
            New MemoryState (last_review is left for the caller to set)
        """
        ...

    @abstractmethod
    def forgetting_curve(self, elapsed_days: int, stability: float) -> float:
        """
        Probability of recall after elapsed_days at the given stability.

        Must be in [0, 1] and non-increasing in elapsed_days.
        """
        ...

    def forget(self, state: MemoryState, timestamp: datetime) -> MemoryState:
        """
        Reset an item's memory.

        Default: drop stability and difficulty, keep last_review so the
        elapsed time of the next review is still measured from it.
        """
        return MemoryState(stability=0.0, difficulty=0.0, last_review=state.last_review)

    def empty_state(self) -> MemoryState:
        """State of an item that has never been reviewed."""
        return MemoryState()
