"""
interval-bounds: generalised intervals and partitions thereof.

Intervals are built from a pair of bounds, each of which is unbounded,
open, closed, or dynamically open-or-closed. Every operation between two
bound kinds is implemented through an exhaustive per-pair table, so
intersections, union-closures and containment tests are total over all
interval shapes.

Modules:
    bounds: The four bound kinds
    algebra: Validation, pinch (intersection) and unroll (union-closure)
    interval: The Interval type and its set operations
    partitions: Uniform and breakpoint-based partitions, digitising
    display: Text rendering
    serialization: JSON codec built on Pydantic models
    config: TOML configuration for rendering and serialization

Quick Start::

    from interval_bounds import Interval, Declarative

    x = Interval.closed(0.0, 1.0)
    x.contains(0.5)                                  # True
    x.intersect(Interval.open(0.5, 1.5))             # (0.5, 1.0]
    x.intersect(Interval.open(1.0, 2.0))             # None
    Interval.lorc(0.0, 1.0).union_closure(Interval.lcro(1.0, 2.0))   # [0.0, 2.0]

    Declarative([0, 5, 10]).digitise(6).index        # 1
    x.linspace(4).index(0.3)                         # 1
"""

__version__ = "0.1.0"

from interval_bounds.algebra import (
    is_valid,
    pinch_left,
    pinch_right,
    unroll_left,
    unroll_right,
    validate,
)
from interval_bounds.bounds import (
    Bound,
    BoundKind,
    Closed,
    Open,
    OpenOrClosed,
    Unbounded,
)
from interval_bounds.exceptions import (
    DecreasingBoundsError,
    IllFormedBreakpointsError,
    IntervalsError,
    PartitionError,
)
from interval_bounds.interval import Interval
from interval_bounds.partitions import Declarative, Partition, SubInterval, Uniform

__all__ = [
    # Version
    "__version__",
    # Bounds
    "Bound",
    "BoundKind",
    "Unbounded",
    "Open",
    "Closed",
    "OpenOrClosed",
    # Algebra
    "validate",
    "is_valid",
    "pinch_left",
    "pinch_right",
    "unroll_left",
    "unroll_right",
    # Intervals
    "Interval",
    # Partitions
    "Partition",
    "SubInterval",
    "Uniform",
    "Declarative",
    # Errors
    "IntervalsError",
    "DecreasingBoundsError",
    "PartitionError",
    "IllFormedBreakpointsError",
]
