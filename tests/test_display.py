"""Tests for interval_bounds.display."""

import pytest

from interval_bounds.bounds import Closed, Open, OpenOrClosed, Unbounded
from interval_bounds.config import DisplayConfig
from interval_bounds.display import format_bounds, format_interval, format_partition
from interval_bounds.interval import Interval
from interval_bounds.partitions import Declarative, Uniform


class TestFormatInterval:
    @pytest.mark.parametrize(
        "interval,expected",
        [
            (Interval.closed(0, 1), "[0, 1]"),
            (Interval.open(0, 1), "(0, 1)"),
            (Interval.lcro(0.0, 1.5), "[0.0, 1.5)"),
            (Interval.lorc(0.0, 1.5), "(0.0, 1.5]"),
            (Interval.left_closed(2), "[2, ∞)"),
            (Interval.right_open(1), "(∞, 1)"),
            (Interval.unbounded(), "(∞, ∞)"),
            (Interval.degenerate(3), "[3, 3]"),
            (Interval(OpenOrClosed.open(0), OpenOrClosed.closed(1)), "(0, 1]"),
        ],
    )
    def test_default_config(self, interval, expected):
        assert format_interval(interval) == expected
        assert str(interval) == expected

    def test_custom_infinity(self):
        config = DisplayConfig(infinity="inf")
        assert format_interval(Interval.left_open(0), config) == "(0, inf)"
        assert format_interval(Interval.unbounded(), config) == "(inf, inf)"

    def test_custom_separator(self):
        config = DisplayConfig(separator=",")
        assert format_interval(Interval.closed(0, 1), config) == "[0,1]"

    def test_format_bounds(self):
        assert format_bounds(Open(1), Closed(2)) == "(1, 2]"
        assert format_bounds(Unbounded(), Unbounded()) == "(∞, ∞)"


class TestFormatPartition:
    def test_one_subinterval(self):
        assert format_partition(Declarative([0, 10])) == "{0 = x0, x1 = 10}"
        assert format_partition(Uniform(1, 0.0, 1.0)) == "{0.0 = x0, x1 = 1.0}"

    def test_two_subintervals(self):
        assert format_partition(Declarative([0, 5, 10])) == "{0 = x0, x1, x2 = 10}"

    def test_many_subintervals(self):
        assert format_partition(Declarative([0, 1, 2, 3, 4])) == "{0 = x0, x1, ..., x4 = 4}"
        assert format_partition(Uniform(10, -1, 1)) == "{-1 = x0, x1, ..., x10 = 1}"

    def test_custom_separator(self):
        config = DisplayConfig(separator="; ")
        assert format_partition(Declarative([0, 5, 10]), config) == "{0 = x0; x1; x2 = 10}"
