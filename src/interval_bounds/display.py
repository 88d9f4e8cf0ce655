"""Text rendering of intervals and partitions.

Bounds render their own side of an interval through ``fmt_left`` and
``fmt_right``; this module composes the fragments::

    [0, 1]      (0, 1]      (∞, 1)      [2, ∞)      (∞, ∞)

Partitions render as the sequence of their edges, e.g. ``{0 = x0, x1, x2 = 10}``.
The infinity symbol and the separator come from a
:class:`~interval_bounds.config.DisplayConfig`; the defaults match the
built-in configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DisplayConfig

if TYPE_CHECKING:
    from .bounds import Bound
    from .interval import Interval
    from .partitions import Partition

__all__ = ["format_bounds", "format_interval", "format_partition"]

_DEFAULT = DisplayConfig()


def format_bounds(left: Bound, right: Bound, config: DisplayConfig | None = None) -> str:
    """Render a left/right pair as ``"<left-fragment><separator><right-fragment>"``."""
    config = config or _DEFAULT
    return f"{left.fmt_left(config.infinity)}{config.separator}{right.fmt_right(config.infinity)}"


def format_interval(interval: Interval, config: DisplayConfig | None = None) -> str:
    """Render an interval, e.g. ``"[0.0, 1.0)"``."""
    return format_bounds(interval.left, interval.right, config)


def format_partition(partition: Partition, config: DisplayConfig | None = None) -> str:
    """Render a partition by its outer edges and the number of inner edges.

    Example::

        format_partition(Declarative([0, 5, 10]))     # "{0 = x0, x1, x2 = 10}"
        format_partition(Uniform(4, 0.0, 1.0))        # "{0.0 = x0, x1, ..., x4 = 1.0}"
    """
    config = config or _DEFAULT
    sep = config.separator
    outer = partition.interval
    left, right = outer.left.value, outer.right.value
    n = len(partition)

    if n == 1:
        edges = [f"{left} = x0", f"x1 = {right}"]
    elif n == 2:
        edges = [f"{left} = x0", "x1", f"x2 = {right}"]
    else:
        edges = [f"{left} = x0", "x1", "...", f"x{n} = {right}"]
    return "{" + sep.join(edges) + "}"
