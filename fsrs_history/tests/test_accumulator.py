"""
Tests for the retention accumulator.
"""

from fsrs_history.core.events import RangeBounds
from fsrs_history.replay.accumulator import RetentionAccumulator

from .helpers import ScalingModel


def test_range_adds_curve_from_range_start():
    acc = RetentionAccumulator(start_day=10)
    acc.add_range(ScalingModel(), 1.0, RangeBounds(12, 15))

    assert acc.to_list() == [0.0, 0.0, 1.0, 0.5, 0.25]
    assert acc[12] == 1.0
    assert acc[14] == 0.25


def test_empty_range_is_no_work():
    acc = RetentionAccumulator(start_day=0)
    acc.add_range(ScalingModel(), 1.0, RangeBounds(5, 5))
    acc.add_range(ScalingModel(), 1.0, RangeBounds(7, 3))

    assert len(acc) == 0
    assert len(RangeBounds(5, 5)) == 0
    assert len(RangeBounds(7, 3)) == 0


def test_overlapping_ranges_sum():
    acc = RetentionAccumulator(start_day=0)
    model = ScalingModel()
    acc.add_range(model, 1.0, RangeBounds(0, 3))
    acc.add_range(model, 2.0, RangeBounds(1, 3))

    assert acc.to_list() == [1.0, 0.5 + 1.0, 0.25 + 0.5 ** 0.5]


def test_days_before_start_are_dropped():
    acc = RetentionAccumulator(start_day=5)
    acc.add_range(ScalingModel(), 1.0, RangeBounds(3, 7))

    assert acc.to_list() == [0.25, 0.125]


def test_extend_to_pads_with_zero():
    acc = RetentionAccumulator(start_day=0)
    acc.add_range(ScalingModel(), 1.0, RangeBounds(0, 1))
    acc.extend_to(3)

    assert acc.to_list() == [1.0, 0.0, 0.0, 0.0]
    assert acc[100] == 0.0
    assert acc[-1] == 0.0


def test_to_list_is_a_copy():
    acc = RetentionAccumulator(start_day=0)
    acc.add_range(ScalingModel(), 1.0, RangeBounds(0, 2))
    out = acc.to_list()
    out[0] = 42.0

    assert acc[0] == 1.0
