"""
Replay runner: reconstruct memory states and a retention curve from a review log.

Replay is pure: events are applied in the order given, nothing is persisted
and the only outputs are the returned ReplayResult and the hook calls.
"""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, Iterable, Optional

from ..core.clock import DayClock
from ..core.errors import EmptyLogError
from ..core.events import RangeBounds, ReviewEvent
from ..core.state import MemoryState, ReplayResult
from ..logging_config import get_logger
from ..model.fsrs_model import fsrs_version
from ..model.resolver import ModelResolver, ModelSource, as_resolver
from .accumulator import RetentionAccumulator
from .hooks import ReplayHooks

logger = get_logger(__name__)


def historical_replay(
    events: Iterable[ReviewEvent],
    models: ModelSource,
    rollover_ms: int = 0,
    end: Optional[datetime] = None,
    hooks: Optional[ReplayHooks] = None,
) -> ReplayResult:
    """
    Replay a review log against a memory model.

    Args:
        events: Review events sorted ascending by timestamp (not checked)
        models: A MemoryModel for every item, a mapping item id -> MemoryModel,
            or a ModelResolver
        rollover_ms: Milliseconds after midnight at which a new day starts
        end: Last instant of the analysis window (default: now)
        hooks: Observation callbacks (default: none)

    Returns:
        ReplayResult with the retention series (index 0 = first event's day)
        and the final state of every item

    Raises:
        EmptyLogError: If events is empty
        ModelNotFoundError: If a per-item mapping has no model for an item
    """
    log = list(events)
    if not log:
        raise EmptyLogError("Cannot replay an empty review log")

    resolver = as_resolver(models)
    hooks = hooks or ReplayHooks()
    end = end or datetime.now(timezone.utc)
    clock = DayClock(rollover_ms)

    start_day = clock.day_index(log[0].timestamp)
    end_day = clock.day_index(end)
    logger.debug(
        "Replaying %d events with fsrs %s (rollover_ms=%d, days %d..%d)",
        len(log), fsrs_version(), rollover_ms, start_day, end_day,
    )

    states: Dict[int, MemoryState] = {}
    # Stability from the last normal review; forgets never touch it.
    last_stabilities: Dict[int, float] = {}
    retention = RetentionAccumulator(start_day)
    last_day = start_day
    forgets = 0

    for event in log:
        model = resolver.resolve(event.item_id)
        today = clock.day_index(event.timestamp)

        for day in range(last_day, today):
            hooks.day_end(
                MappingProxyType(dict(states)),
                MappingProxyType(dict(last_stabilities)),
                day,
            )
        last_day = today

        current = states.get(event.item_id)

        if event.is_forget:
            # Nothing to forget for an item that was never reviewed.
            if current is not None:
                reset = model.forget(current, event.timestamp)
                states[event.item_id] = reset
                hooks.forget(event.item_id, reset)
                forgets += 1
            continue

        if current is None:
            current = model.empty_state()

        stability = last_stabilities.get(event.item_id)
        if stability is not None and current.last_review is not None:
            bounds = RangeBounds(clock.day_index(current.last_review), today)
            retention.add_range(model, stability, bounds)
            hooks.review_range(stability, current, bounds, event.item_id)

        elapsed = 0
        if current.last_review is not None:
            elapsed = clock.days_between(current.last_review, event.timestamp)
        previous = current if current.has_memory else None

        reviewed = model.next_state(previous, elapsed, event.grade)
        states[event.item_id] = reviewed.reviewed_at(event.timestamp)
        last_stabilities[event.item_id] = reviewed.stability

    _finalize(states, last_stabilities, resolver, clock, retention, end_day, hooks)

    logger.debug(
        "Replay finished: %d items, %d forgets, %d days",
        len(states), forgets, len(retention),
    )
    return ReplayResult(
        retention_by_day=retention.to_list(),
        final_states=dict(states),
        start_day=start_day,
        end_day=end_day,
    )


def _finalize(
    states: Dict[int, MemoryState],
    last_stabilities: Dict[int, float],
    resolver: ModelResolver,
    clock: DayClock,
    retention: RetentionAccumulator,
    end_day: int,
    hooks: ReplayHooks,
) -> None:
    """
    Extend every item's decay from its last review through end_day.

    Items are visited in id order so the float sums do not depend on the
    order the state store happened to be filled in.
    """
    for item_id in sorted(states):
        state = states[item_id]
        stability = last_stabilities.get(item_id)
        if stability is None or state.last_review is None:
            continue
        bounds = RangeBounds(clock.day_index(state.last_review), end_day + 1)
        retention.add_range(resolver.resolve(item_id), stability, bounds)
        hooks.review_range(stability, state, bounds, item_id)

    retention.extend_to(end_day)
