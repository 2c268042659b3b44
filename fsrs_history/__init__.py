"""
FSRS History

Deterministic replay of spaced-repetition review logs: reconstructs every
item's memory state and the population retention curve over time.
"""

__version__ = "0.1.0"

from .core import FORGOTTEN, MemoryState, RangeBounds, ReplayResult, ReviewEvent
from .model import FSRSModel, MemoryModel, PerItemModels, SingleModel
from .replay import ReplayHooks, historical_replay

__all__ = [
    "__version__",
    "FORGOTTEN",
    "MemoryState",
    "RangeBounds",
    "ReplayResult",
    "ReviewEvent",
    "FSRSModel",
    "MemoryModel",
    "PerItemModels",
    "SingleModel",
    "ReplayHooks",
    "historical_replay",
]
