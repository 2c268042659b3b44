"""
Historical replay of review logs.

Replay walks a chronological review log, reconstructs each item's memory
state and sums per-day retrievability. Same log and models -> same result.
"""

from ..core.state import ReplayResult
from .accumulator import RetentionAccumulator
from .hooks import DayEndHook, ForgetHook, ReplayHooks, ReviewRangeHook, noop
from .runner import historical_replay

__all__ = [
    "ReplayResult",
    "RetentionAccumulator",
    "DayEndHook",
    "ForgetHook",
    "ReplayHooks",
    "ReviewRangeHook",
    "noop",
    "historical_replay",
]
