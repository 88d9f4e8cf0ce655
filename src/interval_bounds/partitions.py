"""Partitions of a closed interval into indexed subintervals.

A partition maps a value to the index of the subinterval containing it.
Subintervals are closed on the left and open on the right, except the last
one, which is closed on both sides so the right end of the partition is
covered.

Two implementations are provided:

- :class:`Uniform` splits ``[left, right]`` into ``count`` equal-width pieces.
- :class:`Declarative` uses explicit, ascending breakpoints and a binary
  search.

Example::

    from interval_bounds.partitions import Declarative, Uniform

    Uniform(5, 0.0, 1.0).index(0.7)          # 3
    partition = Declarative([0, 5, 10])
    partition.digitise(6).index              # 1
    partition.digitise(10).interval          # Interval(Closed(5), OpenOrClosed.closed(10))

    # Vectorised lookup, -1 marks values outside the partition
    partition.indices([1, 6, 10, 11])        # array([ 0,  1,  1, -1])
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence, Tuple

import numpy as np

from .bounds import Closed, OpenOrClosed
from .exceptions import IllFormedBreakpointsError, PartitionError
from .interval import Interval

logger = logging.getLogger(__name__)

__all__ = [
    "Partition",
    "SubInterval",
    "Uniform",
    "Declarative",
]


def _partial_cmp(a: Any, b: Any) -> Optional[int]:
    """Three-way comparison returning None when *a* and *b* are unordered."""
    try:
        if a < b:
            return -1
        if a > b:
            return 1
        if a == b:
            return 0
    except TypeError:
        return None
    return None


def _as_floats(items: Any, what: str) -> np.ndarray:
    try:
        return np.asarray(items, dtype=float)
    except (TypeError, ValueError) as e:
        raise PartitionError(
            f"Vectorised lookup needs numeric {what}",
            context={what: repr(items)},
            suggestions=["Use index() or digitise() for non-numeric values"],
        ) from e


@dataclass(frozen=True)
class SubInterval:
    """A labelled piece of a partition.

    Attributes:
        index: Position of the subinterval within its partition.
        interval: ``[a, b)``, or ``[a, b]`` for the last subinterval.
    """

    index: int
    interval: Interval

    @property
    def width(self) -> Any:
        return self.interval.right.value - self.interval.left.value

    @property
    def midpoint(self) -> Any:
        return (self.interval.left.value + self.interval.right.value) / 2


class Partition(ABC):
    """Common interface of interval partitions."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of subintervals."""

    @property
    @abstractmethod
    def interval(self) -> Interval:
        """The closed interval covered by the partition."""

    @abstractmethod
    def index(self, value: Any) -> Optional[int]:
        """Return the index of the subinterval containing *value*.

        Returns None if *value* lies outside the partition or cannot be
        compared with its edges.
        """

    @abstractmethod
    def subinterval(self, k: int) -> Optional[SubInterval]:
        """Return the *k*-th subinterval, or None if *k* is out of range."""

    @abstractmethod
    def indices(self, values: Any) -> np.ndarray:
        """Vectorised :meth:`index` over an array of numbers.

        Only numeric partitions and values are supported. Returns an
        ``int64`` array of the same shape where ``-1`` marks values outside
        the partition (including NaN).

        Raises:
            PartitionError: If the partition edges or the values are not numeric.
        """

    def digitise(self, value: Any) -> Optional[SubInterval]:
        """Return the subinterval to which *value* belongs."""
        k = self.index(value)
        if k is None:
            return None
        return self.subinterval(k)

    digitize = digitise

    def __iter__(self) -> Iterator[SubInterval]:
        for k in range(len(self)):
            yield self.subinterval(k)  # type: ignore[misc]

    def __str__(self) -> str:
        from .display import format_partition

        return format_partition(self)


# ------------------------------------------------------------------
# Uniform
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Uniform(Partition):
    """A partition of ``[left, right]`` into ``count`` equal-width pieces.

    Attributes:
        count: Number of subintervals (at least one).
        left: Left end of the partitioned interval.
        right: Right end of the partitioned interval.

    Raises:
        PartitionError: If ``count < 1`` or ``left`` is not below ``right``.
    """

    count: int
    left: Any
    right: Any

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 1:
            raise PartitionError(
                "Uniform partition needs a positive integer count",
                context={"count": self.count},
            )
        if _partial_cmp(self.left, self.right) != -1:
            raise PartitionError(
                "Uniform partition needs left < right",
                context={"left": self.left, "right": self.right},
                suggestions=["Swap left and right", "Use a non-degenerate interval"],
            )
        logger.debug(f"Uniform partition of [{self.left}, {self.right}] into {self.count}")

    @property
    def width(self) -> Any:
        """Width of each subinterval."""
        return (self.right - self.left) / self.count

    @property
    def interval(self) -> Interval:
        return Interval.closed_unchecked(self.left, self.right)

    def __len__(self) -> int:
        return self.count

    def index(self, value: Any) -> Optional[int]:
        lower = _partial_cmp(self.left, value)
        upper = _partial_cmp(value, self.right)
        if lower is None or upper is None:
            logger.debug(f"Value {value!r} is not comparable with {self}")
            return None
        if lower > 0 or upper > 0:
            return None
        if upper == 0:
            return self.count - 1

        # Scale before dividing: (v - l) / width loses precision, e.g. 0.6 / 0.2 < 3.
        k = math.floor((value - self.left) * self.count / (self.right - self.left))
        return min(k, self.count - 1)

    def subinterval(self, k: int) -> Optional[SubInterval]:
        if not 0 <= k < self.count:
            return None

        if k == self.count - 1:
            right = OpenOrClosed.closed(self.right)
        else:
            right = OpenOrClosed.open(self._edge(k + 1))
        return SubInterval(k, Interval.new_unchecked(Closed(self._edge(k)), right))

    def indices(self, values: Any) -> np.ndarray:
        arr = _as_floats(values, "values")
        left, right = _as_floats((self.left, self.right), "bounds")

        inside = (arr >= left) & (arr <= right)
        safe = np.where(inside, arr, left)
        k = np.floor((safe - left) * self.count / (right - left)).astype(np.int64)
        k = np.minimum(k, self.count - 1)
        return np.where(inside, k, -1).astype(np.int64)

    def _edge(self, k: int) -> Any:
        if k == 0:
            return self.left
        if k == self.count:
            return self.right
        return self.left + (self.right - self.left) * k / self.count


# ------------------------------------------------------------------
# Declarative
# ------------------------------------------------------------------


@dataclass(frozen=True)
class Declarative(Partition):
    """A partition defined by explicit breakpoints.

    ``n`` ascending breakpoints ``p[0] <= ... <= p[n-1]`` define ``n - 1``
    subintervals ``[p[k], p[k+1])``, the last one closed. A repeated
    breakpoint gives an empty subinterval that no value is mapped to.

    Attributes:
        breakpoints: The breakpoints, stored as a tuple.

    Raises:
        IllFormedBreakpointsError: If fewer than two breakpoints are given
            or they are not in ascending order.
    """

    breakpoints: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        self._check_breakpoints(self.breakpoints)
        logger.debug(f"Declarative partition with {len(self.breakpoints)} breakpoints")

    @classmethod
    def new(cls, breakpoints: Sequence[Any]) -> Declarative:
        """Construct a partition with breakpoint validation."""
        return cls(tuple(breakpoints))

    @classmethod
    def new_unchecked(cls, breakpoints: Sequence[Any]) -> Declarative:
        """Construct a partition without breakpoint validation."""
        partition = object.__new__(cls)
        object.__setattr__(partition, "breakpoints", tuple(breakpoints))
        return partition

    @property
    def interval(self) -> Interval:
        return Interval.closed_unchecked(self.breakpoints[0], self.breakpoints[-1])

    def __len__(self) -> int:
        return max(len(self.breakpoints) - 1, 0)

    def __getitem__(self, i: int) -> Any:
        return self.breakpoints[i]

    def index(self, value: Any) -> Optional[int]:
        if len(self) < 1:
            return None
        if _partial_cmp(value, self.breakpoints[-1]) == 0:
            return len(self) - 1
        return self._search(value)

    def subinterval(self, k: int) -> Optional[SubInterval]:
        if not 0 <= k < len(self):
            return None

        if k == len(self) - 1:
            right = OpenOrClosed.closed(self.breakpoints[k + 1])
        else:
            right = OpenOrClosed.open(self.breakpoints[k + 1])
        return SubInterval(k, Interval.new_unchecked(Closed(self.breakpoints[k]), right))

    def indices(self, values: Any) -> np.ndarray:
        arr = _as_floats(values, "values")
        if len(self) < 1:
            return np.full(arr.shape, -1, dtype=np.int64)
        edges = _as_floats(self.breakpoints, "breakpoints")

        k = np.searchsorted(edges, arr, side="right") - 1
        k = np.minimum(k, len(self) - 1)
        inside = (arr >= edges[0]) & (arr <= edges[-1])
        return np.where(inside, k, -1).astype(np.int64)

    def _search(self, value: Any) -> Optional[int]:
        """Binary search over adjacent breakpoint pairs."""
        points = self.breakpoints
        low, high = 0, len(points) - 2

        while low <= high:
            middle = (low + high) // 2
            lower = _partial_cmp(points[middle], value)
            upper = _partial_cmp(points[middle + 1], value)

            if lower is None or upper is None:
                logger.debug(f"Value {value!r} is not comparable with breakpoints")
                return None
            if lower > 0:
                high = middle - 1
            elif upper > 0:
                return middle
            else:
                # Equal to p[middle + 1] also moves right, past repeated breakpoints.
                low = middle + 1

        return None

    @staticmethod
    def _check_breakpoints(breakpoints: Tuple[Any, ...]) -> None:
        if len(breakpoints) < 2:
            raise IllFormedBreakpointsError(
                breakpoints, "at least two breakpoints are required"
            )
        for a, b in zip(breakpoints, breakpoints[1:]):
            if _partial_cmp(a, b) not in (-1, 0):
                raise IllFormedBreakpointsError(breakpoints)
