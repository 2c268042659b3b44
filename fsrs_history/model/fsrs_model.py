"""
FSRS memory model.

Adapts fsrs.Scheduler to the MemoryModel interface. Every transition is
computed by the library itself: a card is placed at a fixed UTC anchor and
reviewed exactly elapsed_days later, so the scheduler sees the same whole-day
delta the replay computed from its day clock.
"""

from datetime import datetime, timedelta, timezone
from importlib.metadata import PackageNotFoundError, version
from typing import Optional, Sequence

from fsrs import Card, Rating, Scheduler, State

from ..core.events import Grade
from ..core.state import MemoryState
from .base import MemoryModel

# Any fixed UTC instant works; only differences from it matter.
ANCHOR = datetime(2000, 1, 1, tzinfo=timezone.utc)

# Card id used for throwaway cards (fsrs derives one from the clock otherwise).
_SCRATCH_CARD_ID = 0


def fsrs_version() -> str:
    """Installed version of the fsrs library."""
    try:
        return version("fsrs")
    except PackageNotFoundError:
        return "unknown"


class FSRSModel(MemoryModel):
    """
    Memory model backed by the fsrs library.

    Learning and relearning steps are disabled and fuzzing is off, so each
    review is one long-term memory transition and results are reproducible.

    Usage:
        model = FSRSModel()
        state = model.next_state(None, 0, Rating.Good)
        r = model.forgetting_curve(10, state.stability)
    """

    def __init__(
        self,
        parameters: Optional[Sequence[float]] = None,
        desired_retention: float = 0.9,
    ) -> None:
        kwargs = {
            "desired_retention": desired_retention,
            "learning_steps": (),
            "relearning_steps": (),
            "enable_fuzzing": False,
        }
        if parameters is not None:
            kwargs["parameters"] = tuple(parameters)
        self.scheduler = Scheduler(**kwargs)

    @property
    def parameters(self) -> Sequence[float]:
        return tuple(self.scheduler.parameters)

    def next_state(
        self, state: Optional[MemoryState], elapsed_days: int, grade: Grade
    ) -> MemoryState:
        rating = Rating(int(grade))
        review_at = ANCHOR + timedelta(days=elapsed_days)

        if state is None or not state.has_memory:
            card = Card(card_id=_SCRATCH_CARD_ID, due=ANCHOR)
        else:
            card = Card(
                card_id=_SCRATCH_CARD_ID,
                state=State.Review,
                stability=state.stability,
                difficulty=state.difficulty,
                due=ANCHOR,
                last_review=ANCHOR,
            )

        reviewed, _ = self.scheduler.review_card(card, rating, review_at)
        return MemoryState(stability=reviewed.stability, difficulty=reviewed.difficulty)

    def forgetting_curve(self, elapsed_days: int, stability: float) -> float:
        card = Card(
            card_id=_SCRATCH_CARD_ID,
            state=State.Review,
            stability=stability,
            last_review=ANCHOR,
        )
        return self.scheduler.get_card_retrievability(
            card, ANCHOR + timedelta(days=elapsed_days)
        )

    def __repr__(self) -> str:
        return (
            f"FSRSModel(desired_retention={self.scheduler.desired_retention}, "
            f"parameters={list(self.parameters)})"
        )
