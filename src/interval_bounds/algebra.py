"""Bound algebra: validation, pinch and unroll.

Three combinators act on bounds:

- ``validate(left, right)`` checks that a left/right pair describes a
  legal interval and is the single authority for interval legality.
- ``pinch_left`` / ``pinch_right`` keep the *tighter* of two bounds on the
  same side. They give the boundaries of an intersection.
- ``unroll_left`` / ``unroll_right`` keep the *looser* of two bounds on the
  same side. Followed by ``with_limit_point()`` they give the boundaries of
  a union-closure.

Each combinator is driven by a table with one rule per ordered pair of
:class:`~interval_bounds.bounds.BoundKind` members and no fallback, so a new
bound kind cannot be added without revisiting every table. Rules involving
``OpenOrClosed`` resolve it to its current concrete kind, apply the concrete
rule and re-wrap the result.

Example::

    from interval_bounds.algebra import pinch_left, unroll_right, validate
    from interval_bounds.bounds import Closed, Open

    pinch_left(Closed(1.0), Open(2.0))     # OpenOrClosed.open(2.0)
    unroll_right(Closed(1.0), Open(2.0))   # OpenOrClosed.open(2.0)
    validate(Closed(0.0), Open(0.0))       # raises DecreasingBoundsError
"""

from __future__ import annotations

from itertools import product
from typing import Callable, Dict, Tuple

from .bounds import Bound, BoundKind, OpenOrClosed, Unbounded
from .exceptions import DecreasingBoundsError

__all__ = [
    "KIND_PAIRS",
    "PINCH_LEFT",
    "PINCH_RIGHT",
    "UNROLL_LEFT",
    "UNROLL_RIGHT",
    "DECREASING",
    "pinch_left",
    "pinch_right",
    "unroll_left",
    "unroll_right",
    "validate",
    "is_valid",
]

KindPair = Tuple[BoundKind, BoundKind]
Combine = Callable[[Bound, Bound], Bound]
Check = Callable[[Bound, Bound], bool]

U = BoundKind.UNBOUNDED
O = BoundKind.OPEN  # noqa: E741
C = BoundKind.CLOSED
M = BoundKind.OPEN_OR_CLOSED

#: Every ordered pair of bound kinds; each table below has exactly these keys.
KIND_PAIRS = frozenset(product(BoundKind, BoundKind))


def _dispatch(table: Dict[KindPair, Combine], a: Bound, b: Bound) -> Bound:
    return table[(a.kind, b.kind)](a, b)


def _first(a: Bound, b: Bound) -> Bound:
    return a


def _second(a: Bound, b: Bound) -> Bound:
    return b


def _unbounded(a: Bound, b: Bound) -> Bound:
    return Unbounded()


def _resolving_first(table: Dict[KindPair, Combine]) -> Combine:
    """Rule for a dynamic first operand: use its concrete kind, then re-wrap."""

    def rule(a: Bound, b: Bound) -> Bound:
        return OpenOrClosed.wrap(_dispatch(table, a.resolve(), b))  # type: ignore[attr-defined]

    return rule


def _resolving_second(table: Dict[KindPair, Combine]) -> Combine:
    """Rule for a dynamic second operand: use its concrete kind, then re-wrap."""

    def rule(a: Bound, b: Bound) -> Bound:
        return OpenOrClosed.wrap(_dispatch(table, a, b.resolve()))  # type: ignore[attr-defined]

    return rule


# ------------------------------------------------------------------
# Pinch
# ------------------------------------------------------------------


def _larger(a: Bound, b: Bound) -> Bound:
    return a if a.value >= b.value else b


def _smaller(a: Bound, b: Bound) -> Bound:
    return a if a.value <= b.value else b


def _pinch_left_closed_open(a: Bound, b: Bound) -> Bound:
    # Tie excludes the point.
    if a.value > b.value:
        return OpenOrClosed.closed(a.value)
    return OpenOrClosed.open(b.value)


def _pinch_right_closed_open(a: Bound, b: Bound) -> Bound:
    if a.value < b.value:
        return OpenOrClosed.closed(a.value)
    return OpenOrClosed.open(b.value)


def _pinch_left_open_closed(a: Bound, b: Bound) -> Bound:
    if a.value >= b.value:
        return OpenOrClosed.open(a.value)
    return OpenOrClosed.closed(b.value)


def _pinch_right_open_closed(a: Bound, b: Bound) -> Bound:
    if a.value <= b.value:
        return OpenOrClosed.open(a.value)
    return OpenOrClosed.closed(b.value)


PINCH_LEFT: Dict[KindPair, Combine] = {}
PINCH_LEFT.update(
    {
        (U, U): _first,
        (U, O): _second,
        (U, C): _second,
        (U, M): _second,
        (O, U): _first,
        (O, O): _larger,
        (O, C): _pinch_left_open_closed,
        (O, M): _resolving_second(PINCH_LEFT),
        (C, U): _first,
        (C, O): _pinch_left_closed_open,
        (C, C): _larger,
        (C, M): _resolving_second(PINCH_LEFT),
        (M, U): _first,
        (M, O): _resolving_first(PINCH_LEFT),
        (M, C): _resolving_first(PINCH_LEFT),
        (M, M): _resolving_first(PINCH_LEFT),
    }
)

PINCH_RIGHT: Dict[KindPair, Combine] = {}
PINCH_RIGHT.update(
    {
        (U, U): _first,
        (U, O): _second,
        (U, C): _second,
        (U, M): _second,
        (O, U): _first,
        (O, O): _smaller,
        (O, C): _pinch_right_open_closed,
        (O, M): _resolving_second(PINCH_RIGHT),
        (C, U): _first,
        (C, O): _pinch_right_closed_open,
        (C, C): _smaller,
        (C, M): _resolving_second(PINCH_RIGHT),
        (M, U): _first,
        (M, O): _resolving_first(PINCH_RIGHT),
        (M, C): _resolving_first(PINCH_RIGHT),
        (M, M): _resolving_first(PINCH_RIGHT),
    }
)


def pinch_left(a: Bound, b: Bound) -> Bound:
    """Return the tighter of two left-hand bounds.

    ``Unbounded`` is the identity. Between an open and a closed bound on
    the same value the open one wins, since the intersection cannot hold
    a point that one of the operands excludes.
    """
    return _dispatch(PINCH_LEFT, a, b)


def pinch_right(a: Bound, b: Bound) -> Bound:
    """Return the tighter of two right-hand bounds."""
    return _dispatch(PINCH_RIGHT, a, b)


# ------------------------------------------------------------------
# Unroll
# ------------------------------------------------------------------


def _unroll_left_closed_open(a: Bound, b: Bound) -> Bound:
    # Tie keeps the point.
    if a.value <= b.value:
        return OpenOrClosed.closed(a.value)
    return OpenOrClosed.open(b.value)


def _unroll_right_closed_open(a: Bound, b: Bound) -> Bound:
    if a.value >= b.value:
        return OpenOrClosed.closed(a.value)
    return OpenOrClosed.open(b.value)


def _unroll_left_open_closed(a: Bound, b: Bound) -> Bound:
    if a.value < b.value:
        return OpenOrClosed.open(a.value)
    return OpenOrClosed.closed(b.value)


def _unroll_right_open_closed(a: Bound, b: Bound) -> Bound:
    if a.value > b.value:
        return OpenOrClosed.open(a.value)
    return OpenOrClosed.closed(b.value)


UNROLL_LEFT: Dict[KindPair, Combine] = {}
UNROLL_LEFT.update(
    {
        (U, U): _unbounded,
        (U, O): _unbounded,
        (U, C): _unbounded,
        (U, M): _unbounded,
        (O, U): _unbounded,
        (O, O): _smaller,
        (O, C): _unroll_left_open_closed,
        (O, M): _resolving_second(UNROLL_LEFT),
        (C, U): _unbounded,
        (C, O): _unroll_left_closed_open,
        (C, C): _smaller,
        (C, M): _resolving_second(UNROLL_LEFT),
        (M, U): _unbounded,
        (M, O): _resolving_first(UNROLL_LEFT),
        (M, C): _resolving_first(UNROLL_LEFT),
        (M, M): _resolving_first(UNROLL_LEFT),
    }
)

UNROLL_RIGHT: Dict[KindPair, Combine] = {}
UNROLL_RIGHT.update(
    {
        (U, U): _unbounded,
        (U, O): _unbounded,
        (U, C): _unbounded,
        (U, M): _unbounded,
        (O, U): _unbounded,
        (O, O): _larger,
        (O, C): _unroll_right_open_closed,
        (O, M): _resolving_second(UNROLL_RIGHT),
        (C, U): _unbounded,
        (C, O): _unroll_right_closed_open,
        (C, C): _larger,
        (C, M): _resolving_second(UNROLL_RIGHT),
        (M, U): _unbounded,
        (M, O): _resolving_first(UNROLL_RIGHT),
        (M, C): _resolving_first(UNROLL_RIGHT),
        (M, M): _resolving_first(UNROLL_RIGHT),
    }
)


def unroll_left(a: Bound, b: Bound) -> Bound:
    """Return the looser of two left-hand bounds.

    ``Unbounded`` absorbs any operand. Between an open and a closed bound
    on the same value the closed one wins.
    """
    return _dispatch(UNROLL_LEFT, a, b)


def unroll_right(a: Bound, b: Bound) -> Bound:
    """Return the looser of two right-hand bounds."""
    return _dispatch(UNROLL_RIGHT, a, b)


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------


def _never(left: Bound, right: Bound) -> bool:
    return False


def _exceeds(left: Bound, right: Bound) -> bool:
    return left.value > right.value


def _reaches(left: Bound, right: Bound) -> bool:
    return left.value >= right.value


def _decreasing_resolving_left(left: Bound, right: Bound) -> bool:
    return _is_decreasing(left.resolve(), right)  # type: ignore[attr-defined]


def _decreasing_resolving_right(left: Bound, right: Bound) -> bool:
    return _is_decreasing(left, right.resolve())  # type: ignore[attr-defined]


#: Rules answering "is this (left, right) pair decreasing?".
DECREASING: Dict[KindPair, Check] = {
    (U, U): _never,
    (U, O): _never,
    (U, C): _never,
    (U, M): _never,
    (O, U): _never,
    (O, O): _reaches,
    (O, C): _reaches,
    (O, M): _decreasing_resolving_right,
    (C, U): _never,
    (C, O): _reaches,
    (C, C): _exceeds,
    (C, M): _decreasing_resolving_right,
    (M, U): _never,
    (M, O): _decreasing_resolving_left,
    (M, C): _decreasing_resolving_left,
    (M, M): _decreasing_resolving_left,
}


def _is_decreasing(left: Bound, right: Bound) -> bool:
    return DECREASING[(left.kind, right.kind)](left, right)


def validate(left: Bound, right: Bound) -> Tuple[Bound, Bound]:
    """Check that *left* and *right* form a legal interval.

    A pair touching ``Unbounded`` is always legal. Otherwise the pair is
    rejected when both sides are closed and ``left > right``, or when at
    least one side is open and ``left >= right``. Two closed bounds on the
    same value are the legal single-point case.

    Returns:
        The ``(left, right)`` pair, unchanged.

    Raises:
        DecreasingBoundsError: If the pair violates the ordering.
    """
    if _is_decreasing(left, right):
        raise DecreasingBoundsError(left, right)
    return left, right


def is_valid(left: Bound, right: Bound) -> bool:
    """Return True if *left* and *right* form a legal interval."""
    return not _is_decreasing(left, right)
