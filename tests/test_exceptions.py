"""Tests for interval_bounds.exceptions module."""

import pytest

from interval_bounds.bounds import Closed, Open
from interval_bounds.exceptions import (
    ConfigurationError,
    DecreasingBoundsError,
    IllFormedBreakpointsError,
    IntervalsError,
    PartitionError,
    SerializationError,
)


class TestIntervalsError:
    """Tests for the base exception class."""

    def test_basic_message(self):
        """Test basic error message."""
        err = IntervalsError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}
        assert err.suggestions == []

    def test_with_context(self):
        """Test error with context dictionary."""
        err = IntervalsError(
            "Lookup failed",
            context={"value": 3.5, "count": 4},
        )
        msg = str(err)
        assert "Lookup failed" in msg
        assert "Context:" in msg
        assert "value: 3.5" in msg
        assert "count: 4" in msg

    def test_with_suggestions(self):
        """Test error with suggestions list."""
        err = IntervalsError(
            "Invalid bounds",
            suggestions=["Swap the bounds", "Use a closed interval"],
        )
        msg = str(err)
        assert "Suggestions:" in msg
        assert "  - Swap the bounds" in msg
        assert "  - Use a closed interval" in msg

    def test_context_precedes_suggestions(self):
        err = IntervalsError("Failed", context={"a": 1}, suggestions=["Retry"])
        msg = str(err)
        assert msg.index("Context:") < msg.index("Suggestions:")


class TestDecreasingBoundsError:
    """Tests for DecreasingBoundsError."""

    def test_keeps_bounds(self):
        err = DecreasingBoundsError(Closed(2.0), Open(1.0))
        assert err.left == Closed(2.0)
        assert err.right == Open(1.0)

    def test_message(self):
        """Test the offending bounds appear in the message."""
        msg = str(DecreasingBoundsError(Closed(2.0), Open(1.0)))
        assert "Interval bounds are decreasing" in msg
        assert "left: Closed(2.0)" in msg
        assert "right: Open(1.0)" in msg
        assert "Swap the bounds" in msg

    def test_custom_suggestions(self):
        err = DecreasingBoundsError(Open(1), Open(1), suggestions=["Widen the interval"])
        assert err.suggestions == ["Widen the interval"]


class TestIllFormedBreakpointsError:
    """Tests for IllFormedBreakpointsError."""

    def test_default_reason(self):
        err = IllFormedBreakpointsError((0, 5, 3))
        msg = str(err)
        assert "The breakpoints are not well defined" in msg
        assert "ascending order" in msg
        assert "breakpoints: [0, 5, 3]" in msg
        assert err.breakpoints == (0, 5, 3)

    def test_custom_reason(self):
        err = IllFormedBreakpointsError([1], "at least two breakpoints are required")
        assert "at least two breakpoints" in str(err)

    def test_is_partition_error(self):
        assert isinstance(IllFormedBreakpointsError([1]), PartitionError)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correct."""

    def test_all_inherit_from_base(self):
        """Test all exceptions inherit from IntervalsError."""
        exceptions = [
            DecreasingBoundsError,
            PartitionError,
            IllFormedBreakpointsError,
            ConfigurationError,
            SerializationError,
        ]
        for exc_class in exceptions:
            assert issubclass(exc_class, IntervalsError)

    def test_can_catch_by_base_class(self):
        """Test that all exceptions can be caught by base class."""
        with pytest.raises(IntervalsError):
            raise DecreasingBoundsError(Closed(1), Closed(0))

        with pytest.raises(IntervalsError):
            raise IllFormedBreakpointsError([0, 0])

        with pytest.raises(IntervalsError):
            raise SerializationError("test")
