"""
Observation hooks for historical replay.

Hooks are plain synchronous callbacks invoked inline, in event order. Their
return values are ignored. Every hook defaults to noop.
"""

from dataclasses import dataclass
from typing import Callable, Mapping

from ..core.events import RangeBounds
from ..core.state import MemoryState

# (stability, state, bounds, item_id)
ReviewRangeHook = Callable[[float, MemoryState, RangeBounds, int], None]
# (item_id, state)
ForgetHook = Callable[[int, MemoryState], None]
# (states, stabilities, day)
DayEndHook = Callable[[Mapping[int, MemoryState], Mapping[int, float], int], None]


def noop(*args, **kwargs) -> None:
    return None


@dataclass(frozen=True)
class ReplayHooks:
    """
    Hook bundle passed to historical_replay.

    Fields:
        review_range: Called after retention was accumulated for a range.
            stability is the last stability from a normal review (ignores
            forgets), state is the item state at range start, bounds the
            day range, item_id the item.
        forget: Called after an item was reset, with the reset state.
        day_end: Called once per day that ended, with read-only snapshots
            of all item states and last stabilities, and the day index.
    """
    review_range: ReviewRangeHook = noop
    forget: ForgetHook = noop
    day_end: DayEndHook = noop
