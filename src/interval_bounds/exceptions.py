"""
Exception hierarchy for interval-bounds.

All exceptions carry optional context and suggestions so that a failure
can be reported with enough detail to act on:

- Context information (offending bounds, breakpoints, file paths)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Example::

    from interval_bounds.exceptions import DecreasingBoundsError
    from interval_bounds.bounds import Closed

    raise DecreasingBoundsError(Closed(2.0), Closed(1.0))

Empty intersections and failed lookups are *not* errors: they are reported
as ``None`` by the operations that produce them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:
    from .bounds import Bound


class IntervalsError(Exception):
    """
    Base exception for all interval-bounds errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class DecreasingBoundsError(IntervalsError):
    """
    A candidate pair of bounds violates the interval ordering.

    Raised by :func:`interval_bounds.algebra.validate` and therefore by every
    checked constructor. Both offending bounds are kept so callers can
    inspect or repair them.

    Example::

        raise DecreasingBoundsError(Open(1.0), Closed(1.0))

    Attributes:
        left: The left-hand bound that was rejected
        right: The right-hand bound that was rejected
    """

    def __init__(
        self,
        left: Bound,
        right: Bound,
        suggestions: Optional[List[str]] = None,
    ):
        self.left = left
        self.right = right
        super().__init__(
            "Interval bounds are decreasing",
            context={"left": repr(left), "right": repr(right)},
            suggestions=suggestions
            or [
                "Swap the bounds if they were given in the wrong order",
                "Use closed bounds on both sides for a single-point interval",
            ],
        )


class PartitionError(IntervalsError):
    """
    A partition could not be built from the given parameters.

    Example::

        raise PartitionError(
            "Partition needs at least one subinterval",
            context={"count": 0},
        )
    """

    pass


class IllFormedBreakpointsError(PartitionError):
    """
    Breakpoints of a declarative partition are not in ascending order.

    Attributes:
        breakpoints: The rejected breakpoints, as given
    """

    def __init__(
        self,
        breakpoints: Sequence[Any],
        reason: str = "breakpoints must be in ascending order",
    ):
        self.breakpoints = breakpoints
        super().__init__(
            f"The breakpoints are not well defined: {reason}",
            context={"breakpoints": list(breakpoints)},
            suggestions=[
                "Sort the breakpoints",
                "Remove values that cannot be ordered, such as NaN",
            ],
        )


class ConfigurationError(IntervalsError):
    """
    Configuration or settings error.

    Raised when a configuration file is unreadable or invalid.
    """

    pass


class SerializationError(IntervalsError):
    """
    A serialized bound, interval or partition could not be decoded.

    Example::

        raise SerializationError(
            "Unbounded bound must not carry a value",
            context={"kind": "unbounded", "value": 3},
        )
    """

    pass


__all__ = [
    "IntervalsError",
    "DecreasingBoundsError",
    "PartitionError",
    "IllFormedBreakpointsError",
    "ConfigurationError",
    "SerializationError",
]
