"""
Core replay primitives.

- ReviewEvent: Immutable review records
- MemoryState: Reconstructed per-item memory
- ReplayResult: Output of a replay
- DayClock: Timestamp to day-index bucketing
- Canonical: Deterministic serialization
"""

from .events import FORGOTTEN, Grade, RangeBounds, ReviewEvent
from .state import MemoryState, ReplayResult
from .clock import DAY_MS, EPOCH, DayClock, to_epoch_ms
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .errors import (
    ConfigurationError,
    EmptyLogError,
    EventFormatError,
    ModelNotFoundError,
    ReplayError,
)

__all__ = [
    "FORGOTTEN",
    "Grade",
    "RangeBounds",
    "ReviewEvent",
    "MemoryState",
    "ReplayResult",
    "DAY_MS",
    "EPOCH",
    "DayClock",
    "to_epoch_ms",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "ConfigurationError",
    "EmptyLogError",
    "EventFormatError",
    "ModelNotFoundError",
    "ReplayError",
]
