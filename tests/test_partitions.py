"""Tests for interval_bounds.partitions."""

from __future__ import annotations

import logging
from fractions import Fraction

import numpy as np
import pytest

from interval_bounds.bounds import Closed, Open, OpenOrClosed
from interval_bounds.exceptions import IllFormedBreakpointsError, PartitionError
from interval_bounds.interval import Interval
from interval_bounds.partitions import Declarative, Partition, SubInterval, Uniform

# ------------------------------------------------------------------
# Uniform
# ------------------------------------------------------------------


class TestUniformConstruction:
    def test_basic(self):
        partition = Uniform(5, 0.0, 5.0)
        assert len(partition) == 5
        assert partition.width == 1.0
        assert partition.interval == Interval.closed(0.0, 5.0)
        assert isinstance(partition, Partition)

    @pytest.mark.parametrize("count", [0, -1, 2.0, True])
    def test_bad_count(self, count):
        with pytest.raises(PartitionError, match="count"):
            Uniform(count, 0.0, 1.0)

    @pytest.mark.parametrize("left,right", [(1.0, 1.0), (2.0, 1.0), (0.0, float("nan"))])
    def test_bounds_must_ascend(self, left, right):
        with pytest.raises(PartitionError, match="left < right"):
            Uniform(2, left, right)

    def test_frozen(self):
        partition = Uniform(2, 0.0, 1.0)
        with pytest.raises(AttributeError):
            partition.count = 3  # type: ignore[misc]


class TestUniformIndex:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (-1.0, None),
            (6.0, None),
            (0.0, 0),
            (1.0, 1),
            (2.0, 2),
            (3.0, 3),
            (4.0, 4),
            (5.0, 4),
            (0.5, 0),
            (4.999, 4),
        ],
    )
    def test_five_buckets(self, value, expected):
        assert Uniform(5, 0.0, 5.0).index(value) == expected

    def test_unit_interval(self):
        partition = Uniform(5, 0.0, 1.0)
        assert partition.index(0.7) == 3
        assert partition.index(0.6) == 3
        assert partition.index(0.2) == 1
        assert partition.index(1.0) == 4

    def test_single_bucket(self):
        partition = Uniform(1, -1.0, 1.0)
        assert partition.index(-1.0) == 0
        assert partition.index(1.0) == 0
        assert partition.index(1.5) is None

    def test_nan_is_absent(self):
        assert Uniform(4, 0.0, 1.0).index(float("nan")) is None

    def test_incomparable_is_absent(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="interval_bounds.partitions"):
            assert Uniform(4, 0.0, 1.0).index("x") is None
        assert "not comparable" in caplog.text

    def test_fractions(self):
        partition = Uniform(3, Fraction(0), Fraction(1))
        assert partition.index(Fraction(1, 3)) == 1
        assert partition.index(Fraction(2, 3)) == 2
        assert partition.subinterval(1).interval == Interval.lcro(Fraction(1, 3), Fraction(2, 3))


class TestUniformSubinterval:
    def test_first(self):
        sub = Uniform(4, 0.0, 4.0).subinterval(0)
        assert sub.index == 0
        assert sub.interval == Interval.lcro(0.0, 1.0)

    def test_edges_are_per_bucket(self):
        sub = Uniform(4, 0.0, 4.0).subinterval(2)
        assert sub.interval.left == Closed(2.0)
        assert sub.interval.right == Open(3.0)

    def test_last_is_closed(self):
        sub = Uniform(4, 0.0, 4.0).subinterval(3)
        assert sub.interval == Interval.closed(3.0, 4.0)
        assert sub.interval.right == Closed(4.0)

    def test_last_right_edge_is_exact(self):
        sub = Uniform(3, 0.0, 0.3).subinterval(2)
        assert sub.interval.right.value == 0.3

    @pytest.mark.parametrize("k", [-1, 4, 10])
    def test_out_of_range(self, k):
        assert Uniform(4, 0.0, 4.0).subinterval(k) is None

    def test_width_and_midpoint(self):
        sub = Uniform(4, 0.0, 4.0).subinterval(1)
        assert sub.width == pytest.approx(1.0)
        assert sub.midpoint == pytest.approx(1.5)

    def test_digitise_contains_value(self):
        partition = Uniform(10, -2.0, 3.0)
        for value in np.linspace(-2.0, 3.0, 41):
            sub = partition.digitise(float(value))
            assert sub is not None
            assert sub.interval.contains(float(value))

    def test_digitise_outside(self):
        assert Uniform(4, 0.0, 4.0).digitise(5.0) is None
        assert Uniform(4, 0.0, 4.0).digitize(-1.0) is None

    def test_iteration_covers_interval(self):
        subs = list(Uniform(4, 0.0, 4.0))
        assert [s.index for s in subs] == [0, 1, 2, 3]
        assert subs[0].interval.left == Closed(0.0)
        assert subs[-1].interval.right == Closed(4.0)
        for a, b in zip(subs, subs[1:]):
            assert a.interval.right.value == b.interval.left.value


class TestUniformIndices:
    def test_matches_scalar_lookup(self):
        partition = Uniform(5, 0.0, 5.0)
        values = [-1.0, 0.0, 1.0, 2.5, 4.0, 5.0, 6.0]
        expected = [partition.index(v) for v in values]
        result = partition.indices(values)

        assert result.dtype == np.int64
        assert result.tolist() == [-1 if k is None else k for k in expected]

    def test_nan(self):
        result = Uniform(2, 0.0, 1.0).indices(np.array([np.nan, 0.5]))
        assert result.tolist() == [-1, 1]

    def test_keeps_shape(self):
        result = Uniform(2, 0.0, 1.0).indices(np.zeros((2, 3)))
        assert result.shape == (2, 3)
        assert (result == 0).all()

    def test_non_numeric_bounds(self):
        with pytest.raises(PartitionError, match="numeric bounds"):
            Uniform(2, "a", "z").indices([0.0])


# ------------------------------------------------------------------
# Declarative
# ------------------------------------------------------------------


class TestDeclarativeConstruction:
    def test_basic(self):
        partition = Declarative([0, 5, 10])
        assert partition.breakpoints == (0, 5, 10)
        assert len(partition) == 2
        assert partition.interval == Interval.closed(0, 10)
        assert partition[1] == 5
        assert partition[-1] == 10

    def test_new(self):
        assert Declarative.new([1, 2, 3]) == Declarative((1, 2, 3))

    @pytest.mark.parametrize(
        "breakpoints",
        [[0, 5, 3], [1, 1, 0], [3, 2, 1], [0.0, float("nan"), 1.0], [0, "a"]],
    )
    def test_must_ascend(self, breakpoints):
        with pytest.raises(IllFormedBreakpointsError, match="ascending order"):
            Declarative(breakpoints)

    @pytest.mark.parametrize("breakpoints", [[0, 0, 1], [0, 5, 5, 10], [1, 1]])
    def test_repeated_breakpoints_allowed(self, breakpoints):
        partition = Declarative(breakpoints)
        assert len(partition) == len(breakpoints) - 1

    @pytest.mark.parametrize("breakpoints", [[], [1]])
    def test_too_few(self, breakpoints):
        with pytest.raises(IllFormedBreakpointsError, match="at least two"):
            Declarative.new(breakpoints)

    def test_error_is_partition_error(self):
        with pytest.raises(PartitionError):
            Declarative([2, 1])

    def test_new_unchecked(self):
        partition = Declarative.new_unchecked([3, 1])
        assert partition.breakpoints == (3, 1)

    @pytest.mark.parametrize("breakpoints", [[], [5]])
    def test_unchecked_without_subintervals(self, breakpoints):
        partition = Declarative.new_unchecked(breakpoints)
        assert len(partition) == 0
        assert partition.index(5) is None
        assert partition.digitise(5) is None
        assert partition.indices([5.0]).tolist() == [-1]


class TestDeclarativeIndex:
    @pytest.mark.parametrize("value,expected", [(1, 0), (3, 0), (6, 1), (9, 1), (10, 1)])
    def test_three_breakpoints(self, value, expected):
        assert Declarative([0, 5, 10]).digitise(value).index == expected

    @pytest.mark.parametrize("value", [-1, 10.5, 100])
    def test_outside(self, value):
        assert Declarative([0, 5, 10]).index(value) is None
        assert Declarative([0, 5, 10]).digitise(value) is None

    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (0.5, 0), (1, 1), (2, 2), (2.5, 2), (3, 3), (4, 4), (4.9, 4), (5, 4)],
    )
    def test_interior_breakpoints_start_next_bucket(self, value, expected):
        assert Declarative([0, 1, 2, 3, 4, 5]).index(value) == expected

    def test_uneven_breakpoints(self):
        partition = Declarative([-10.0, -1.0, 0.0, 0.1, 100.0])
        assert partition.index(-5.0) == 0
        assert partition.index(-0.5) == 1
        assert partition.index(0.05) == 2
        assert partition.index(50.0) == 3
        assert partition.index(100.0) == 3

    def test_two_breakpoints(self):
        partition = Declarative([1, 2])
        assert partition.index(1) == 0
        assert partition.index(2) == 0
        assert partition.index(3) is None

    def test_incomparable_is_absent(self):
        assert Declarative([0, 5, 10]).index("x") is None
        assert Declarative([0, 5, 10]).index(None) is None

    def test_nan_is_absent(self):
        assert Declarative([0.0, 1.0, 2.0]).index(float("nan")) is None

    def test_strings(self):
        partition = Declarative(["a", "m", "z"])
        assert partition.index("c") == 0
        assert partition.index("m") == 1
        assert partition.index("z") == 1

    def test_repeated_breakpoint(self):
        partition = Declarative([0, 5, 5, 10])
        assert partition.index(4) == 0
        assert partition.index(5) == 2
        assert partition.index(7) == 2
        assert partition.digitise(5).interval.contains(5)
        assert partition.subinterval(1).interval == Interval.lcro_unchecked(5, 5)

    def test_repeated_breakpoint_runs(self):
        assert Declarative([0, 5, 5, 5, 10]).index(5) == 3
        assert Declarative([0, 0, 1]).index(0) == 1

    def test_repeated_last_breakpoint(self):
        sub = Declarative([0, 5, 5]).digitise(5)
        assert sub.index == 1
        assert sub.interval == Interval.closed(5, 5)

    def test_never_maps_to_empty_subinterval(self):
        partition = Declarative([0, 1, 1, 2, 2, 2, 3])
        for value in [0, 0.5, 1, 1.5, 2, 2.5, 3]:
            sub = partition.digitise(value)
            assert sub is not None
            assert sub.interval.contains(value)


class TestDeclarativeSubinterval:
    def test_inner_is_half_open(self):
        sub = Declarative([0, 5, 10]).subinterval(0)
        assert sub == SubInterval(0, Interval.lcro(0, 5))
        assert sub.interval.right.is_open

    def test_last_is_closed(self):
        sub = Declarative([0, 5, 10]).digitise(10)
        assert sub.interval == Interval(Closed(5), OpenOrClosed.closed(10))
        assert sub.width == 5
        assert sub.midpoint == 7.5

    @pytest.mark.parametrize("k", [-1, 2, 5])
    def test_out_of_range(self, k):
        assert Declarative([0, 5, 10]).subinterval(k) is None

    def test_iteration(self):
        subs = list(Declarative([0, 1, 3, 6]))
        assert [s.width for s in subs] == [1, 2, 3]
        assert subs[-1].interval.is_bounded


class TestDeclarativeIndices:
    def test_matches_scalar_lookup(self):
        partition = Declarative([0, 5, 10])
        assert partition.indices([1, 6, 10, 11]).tolist() == [0, 1, 1, -1]

    def test_breakpoints_and_outside(self):
        partition = Declarative([0.0, 1.0, 2.0, 3.0])
        result = partition.indices(np.array([-0.1, 0.0, 1.0, 2.0, 3.0, np.nan]))
        assert result.dtype == np.int64
        assert result.tolist() == [-1, 0, 1, 2, 2, -1]

    def test_scalar(self):
        assert int(Declarative([0, 5, 10]).indices(7)) == 1

    def test_repeated_breakpoints_match_scalar_lookup(self):
        partition = Declarative([0, 5, 5, 10])
        values = [0, 4, 5, 7, 10, 11]
        expected = [-1 if partition.index(v) is None else partition.index(v) for v in values]
        assert partition.indices(values).tolist() == expected
        assert partition.indices([5]).tolist() == [2]

    def test_non_numeric_breakpoints(self):
        with pytest.raises(PartitionError, match="numeric breakpoints"):
            Declarative(["a", "m", "z"]).indices([0.5])

    def test_non_numeric_values(self):
        with pytest.raises(PartitionError, match="numeric values"):
            Declarative(["a", "m", "z"]).indices(["c"])


# ------------------------------------------------------------------
# Display
# ------------------------------------------------------------------


class TestDisplay:
    def test_declarative(self):
        assert str(Declarative([0, 5, 10])) == "{0 = x0, x1, x2 = 10}"

    def test_uniform(self):
        assert str(Uniform(4, 0.0, 1.0)) == "{0.0 = x0, x1, ..., x4 = 1.0}"
