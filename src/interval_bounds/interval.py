"""Interval type built from a pair of bounds.

Provides an ``Interval`` dataclass holding a left and a right
:class:`~interval_bounds.bounds.Bound`. Each side may be unbounded, open,
closed or dynamically open-or-closed, so every shape from ``(∞, ∞)`` to
``[a, a]`` is one type. Intervals are immutable: set operations return new
instances.

Example::

    from interval_bounds import Interval

    x = Interval.closed(-1.0, 0.0)
    y = Interval.closed(0.0, 1.0)

    x.contains(-0.5)                    # True
    x.intersect(y)                      # Interval.degenerate(0.0)
    Interval.lcro(0.0, 1.0).union_closure(Interval.lorc(1.0, 2.0))
    # Interval(Closed(0.0), Closed(2.0))

    Interval.closed(0.0, 1.0).intersect(Interval.open(1.0, 2.0))   # None
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from . import algebra
from .bounds import Bound, BoundKind, Closed, Open, Unbounded
from .exceptions import PartitionError

if TYPE_CHECKING:
    from .partitions import Uniform

logger = logging.getLogger(__name__)

__all__ = ["Interval", "CONTAINS"]

U = BoundKind.UNBOUNDED
O = BoundKind.OPEN  # noqa: E741
C = BoundKind.CLOSED
M = BoundKind.OPEN_OR_CLOSED


def _above(left: Bound, value: Any) -> bool:
    return value > left.value if left.is_open else value >= left.value


def _below(right: Bound, value: Any) -> bool:
    return value < right.value if right.is_open else value <= right.value


Contains = Callable[[Bound, Bound, Any], bool]

#: Containment rule for every (left kind, right kind) pair.
CONTAINS: Dict[Tuple[BoundKind, BoundKind], Contains] = {
    (U, U): lambda lo, hi, v: True,
    (U, O): lambda lo, hi, v: v < hi.value,
    (U, C): lambda lo, hi, v: v <= hi.value,
    (U, M): lambda lo, hi, v: _below(hi, v),
    (O, U): lambda lo, hi, v: v > lo.value,
    (O, O): lambda lo, hi, v: lo.value < v < hi.value,
    (O, C): lambda lo, hi, v: lo.value < v <= hi.value,
    (O, M): lambda lo, hi, v: v > lo.value and _below(hi, v),
    (C, U): lambda lo, hi, v: v >= lo.value,
    (C, O): lambda lo, hi, v: lo.value <= v < hi.value,
    (C, C): lambda lo, hi, v: lo.value <= v <= hi.value,
    (C, M): lambda lo, hi, v: v >= lo.value and _below(hi, v),
    (M, U): lambda lo, hi, v: _above(lo, v),
    (M, O): lambda lo, hi, v: _above(lo, v) and v < hi.value,
    (M, C): lambda lo, hi, v: _above(lo, v) and v <= hi.value,
    (M, M): lambda lo, hi, v: _above(lo, v) and _below(hi, v),
}


@dataclass(frozen=True)
class Interval:
    """An interval between a left and a right bound.

    Constructing an ``Interval`` directly validates the bounds; use
    :meth:`new_unchecked` only for pairs already known to be ordered.

    Attributes:
        left: The left-hand bound.
        right: The right-hand bound.

    Raises:
        DecreasingBoundsError: If the bounds violate the interval ordering.
    """

    left: Bound
    right: Bound

    def __post_init__(self) -> None:
        self._check_bound_types(self.left, self.right)
        algebra.validate(self.left, self.right)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def new(cls, left: Bound, right: Bound) -> Interval:
        """Construct an interval with bound validation."""
        return cls(left, right)

    @classmethod
    def new_unchecked(cls, left: Bound, right: Bound) -> Interval:
        """Construct an interval without bound validation.

        The caller is responsible for the ordering of *left* and *right*.
        """
        cls._check_bound_types(left, right)
        interval = object.__new__(cls)
        object.__setattr__(interval, "left", left)
        object.__setattr__(interval, "right", right)
        return interval

    @classmethod
    def unbounded(cls) -> Interval:
        """Construct the totally unbounded interval ``(∞, ∞)``."""
        return cls.new_unchecked(Unbounded(), Unbounded())

    @classmethod
    def left_bounded(cls, left: Bound) -> Interval:
        """Construct an interval bounded by *left*, unbounded on the right."""
        return cls.new_unchecked(left, Unbounded())

    @classmethod
    def right_bounded(cls, right: Bound) -> Interval:
        """Construct an interval bounded by *right*, unbounded on the left."""
        return cls.new_unchecked(Unbounded(), right)

    @classmethod
    def left_open(cls, left: Any) -> Interval:
        """Construct ``(left, ∞)``."""
        return cls.left_bounded(Open(left))

    @classmethod
    def left_closed(cls, left: Any) -> Interval:
        """Construct ``[left, ∞)``."""
        return cls.left_bounded(Closed(left))

    @classmethod
    def right_open(cls, right: Any) -> Interval:
        """Construct ``(∞, right)``."""
        return cls.right_bounded(Open(right))

    @classmethod
    def right_closed(cls, right: Any) -> Interval:
        """Construct ``(∞, right]``."""
        return cls.right_bounded(Closed(right))

    @classmethod
    def open(cls, left: Any, right: Any) -> Interval:
        """Construct ``(left, right)`` with bound validation."""
        return cls(Open(left), Open(right))

    @classmethod
    def open_unchecked(cls, left: Any, right: Any) -> Interval:
        return cls.new_unchecked(Open(left), Open(right))

    @classmethod
    def closed(cls, left: Any, right: Any) -> Interval:
        """Construct ``[left, right]`` with bound validation."""
        return cls(Closed(left), Closed(right))

    @classmethod
    def closed_unchecked(cls, left: Any, right: Any) -> Interval:
        return cls.new_unchecked(Closed(left), Closed(right))

    @classmethod
    def lcro(cls, left: Any, right: Any) -> Interval:
        """Construct the left-closed, right-open ``[left, right)``."""
        return cls(Closed(left), Open(right))

    @classmethod
    def lcro_unchecked(cls, left: Any, right: Any) -> Interval:
        return cls.new_unchecked(Closed(left), Open(right))

    @classmethod
    def lorc(cls, left: Any, right: Any) -> Interval:
        """Construct the left-open, right-closed ``(left, right]``."""
        return cls(Open(left), Closed(right))

    @classmethod
    def lorc_unchecked(cls, left: Any, right: Any) -> Interval:
        return cls.new_unchecked(Open(left), Closed(right))

    @classmethod
    def degenerate(cls, value: Any) -> Interval:
        """Construct the single-point interval ``[value, value]``."""
        return cls.new_unchecked(Closed(value), Closed(value))

    @classmethod
    def unit(cls, value_type: Callable[[int], Any] = float) -> Interval:
        """Construct the unit interval ``[0, 1]`` in the given value type.

        Example::

            Interval.unit()                 # [0.0, 1.0]
            Interval.unit(Fraction)         # [Fraction(0, 1), Fraction(1, 1)]
        """
        return cls.new_unchecked(Closed(value_type(0)), Closed(value_type(1)))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def is_degenerate(self) -> bool:
        """True if both bounds are closed and carry equal values."""
        if not (self.left.is_closed and self.right.is_closed):
            return False
        return self.left.value == self.right.value

    @property
    def is_bounded(self) -> bool:
        """True if neither side is unbounded."""
        return self.left.has_value and self.right.has_value

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def contains(self, value: Any) -> bool:
        """Return True if *value* lies within the interval."""
        rule = CONTAINS[(self.left.kind, self.right.kind)]
        return rule(self.left, self.right, value)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def intersect(self, other: Interval) -> Optional[Interval]:
        """Return the overlap of two intervals, or ``None`` if it is empty."""
        left = algebra.pinch_left(self.left, other.left)
        right = algebra.pinch_right(self.right, other.right)

        if not algebra.is_valid(left, right):
            logger.debug(f"Empty intersection of {self!r} and {other!r}")
            return None
        return Interval.new_unchecked(left, right)

    def union_closure(self, other: Interval) -> Interval:
        """Return the smallest closed interval containing both.

        Open bounds of the result are closed, so adjacent half-open
        intervals such as ``(0, 1]`` and ``[1, 2)`` heal into ``[0, 2]``.
        Disjoint operands produce their hull.
        """
        left = algebra.unroll_left(self.left, other.left).with_limit_point()
        right = algebra.unroll_right(self.right, other.right).with_limit_point()
        return Interval.new_unchecked(left, right)

    # ------------------------------------------------------------------
    # Partitioning
    # ------------------------------------------------------------------

    def linspace(self, count: int) -> Uniform:
        """Split a closed interval into *count* equal-width subintervals.

        Raises:
            PartitionError: If either side of the interval is not closed.
        """
        from .partitions import Uniform

        if not (self.left.is_closed and self.right.is_closed):
            raise PartitionError(
                "Only closed intervals can be split uniformly",
                context={"interval": str(self)},
                suggestions=["Take the union-closure with itself to close both sides"],
            )
        return Uniform(count, self.left.value, self.right.value)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Interval({self.left!r}, {self.right!r})"

    def __str__(self) -> str:
        from .display import format_interval

        return format_interval(self)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _check_bound_types(left: object, right: object) -> None:
        for side, bound in (("left", left), ("right", right)):
            if not isinstance(bound, Bound):
                msg = f"Interval {side} must be a Bound, got {type(bound).__name__}"
                raise TypeError(msg)
