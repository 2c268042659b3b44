"""
Tests for the fsrs-backed memory model.
"""

from datetime import timedelta

from fsrs import Card, Rating, Scheduler

from fsrs_history.core.state import MemoryState
from fsrs_history.model import FSRSModel

from .helpers import T0


def _oracle() -> Scheduler:
    return Scheduler(learning_steps=(), relearning_steps=(), enable_fuzzing=False)


def test_first_review_matches_scheduler():
    model = FSRSModel()
    for rating in Rating:
        card, _ = _oracle().review_card(Card(card_id=1), rating, T0)
        state = model.next_state(None, 0, rating)

        assert state.stability == card.stability
        assert state.difficulty == card.difficulty
        assert state.last_review is None


def test_review_after_interval_matches_scheduler():
    scheduler = _oracle()
    card, _ = scheduler.review_card(Card(card_id=1), Rating.Good, T0)
    card, _ = scheduler.review_card(card, Rating.Hard, T0 + timedelta(days=7))

    model = FSRSModel()
    state = model.next_state(None, 0, Rating.Good)
    state = model.next_state(state, 7, Rating.Hard)

    assert state.stability == card.stability
    assert state.difficulty == card.difficulty


def test_empty_state_treated_as_new():
    """A reset (zero stability) state reviews like a brand-new card."""
    model = FSRSModel()
    fresh = model.next_state(None, 0, Rating.Good)
    after_reset = model.next_state(MemoryState(0.0, 0.0, T0), 12, Rating.Good)

    assert after_reset == fresh


def test_forgetting_curve_matches_scheduler():
    model = FSRSModel()
    scheduler = _oracle()
    card = Card(card_id=1, stability=4.0, difficulty=5.0, last_review=T0)

    for elapsed in (0, 1, 4, 30):
        expected = scheduler.get_card_retrievability(card, T0 + timedelta(days=elapsed))
        assert model.forgetting_curve(elapsed, 4.0) == expected

    assert model.forgetting_curve(0, 4.0) == 1.0


def test_forgetting_curve_non_increasing():
    model = FSRSModel()
    values = [model.forgetting_curve(d, 3.0) for d in range(60)]

    assert all(0.0 <= v <= 1.0 for v in values)
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_forget_keeps_last_review():
    model = FSRSModel()
    reset = model.forget(MemoryState(10.0, 5.0, T0), T0 + timedelta(days=3))

    assert reset == MemoryState(0.0, 0.0, T0)
    assert not reset.has_memory


def test_custom_parameters_change_trajectory():
    weights = list(Scheduler().parameters)
    weights[2] = weights[2] * 2

    default = FSRSModel().next_state(None, 0, Rating.Good)
    custom = FSRSModel(parameters=weights).next_state(None, 0, Rating.Good)

    assert custom.stability != default.stability
    assert FSRSModel(parameters=weights).parameters == tuple(weights)
