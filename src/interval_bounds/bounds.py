"""Bound kinds: the four ways one side of an interval can be limited.

A bound is one of

- ``Unbounded()``: no limit on that side, carries no value;
- ``Open(v)``: limited by ``v``, which is excluded;
- ``Closed(v)``: limited by ``v``, which is included;
- ``OpenOrClosed(tag, v)``: a bound whose openness is only known at
  runtime. It is produced whenever combining two bounds can yield either
  an open or a closed result.

The set of kinds is closed: the dispatch tables in
:mod:`interval_bounds.algebra` and :mod:`interval_bounds.interval` hold one
entry per ordered pair of :class:`BoundKind` members.

Example::

    from interval_bounds.bounds import Closed, Open, OpenOrClosed, Unbounded

    Closed(1.0).is_closed            # True
    Open(1.0).with_limit_point()     # Closed(1.0)
    Open(1.0) == OpenOrClosed.open(1.0)   # True
    Unbounded().value                # None
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

INFINITY = "∞"


class BoundKind(str, Enum):
    """Classification of a bound."""

    UNBOUNDED = "unbounded"
    OPEN = "open"
    CLOSED = "closed"
    OPEN_OR_CLOSED = "open_or_closed"


class Bound(ABC):
    """Base class for the four bound kinds.

    Two bounds are equal when they admit the same limit: same openness and
    same value. An ``OpenOrClosed`` therefore equals the concrete bound
    matching its current tag, and ``Unbounded`` equals only itself.
    """

    kind: ClassVar[BoundKind]
    value: Any

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """True if the limit value is excluded."""

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        """True if the limit value is included."""

    @abstractmethod
    def with_limit_point(self) -> Bound:
        """Return the bound that also includes its limit point."""

    @abstractmethod
    def fmt_left(self, infinity: str = INFINITY) -> str:
        """Render this bound as the left-hand side of an interval."""

    @abstractmethod
    def fmt_right(self, infinity: str = INFINITY) -> str:
        """Render this bound as the right-hand side of an interval."""

    @property
    def has_value(self) -> bool:
        return self.is_open or self.is_closed

    def _identity(self) -> tuple[bool, bool, Any]:
        return (self.is_open, self.is_closed, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bound):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


def _require_value(bound: Bound, value: Any) -> None:
    if value is None:
        msg = f"{type(bound).__name__} bound requires a value"
        raise TypeError(msg)


@dataclass(frozen=True, eq=False, repr=False)
class Unbounded(Bound):
    """The absence of a bound."""

    kind: ClassVar[BoundKind] = BoundKind.UNBOUNDED

    @property
    def value(self) -> None:
        return None

    @property
    def is_open(self) -> bool:
        return False

    @property
    def is_closed(self) -> bool:
        return False

    def with_limit_point(self) -> Unbounded:
        return self

    def fmt_left(self, infinity: str = INFINITY) -> str:
        return f"({infinity}"

    def fmt_right(self, infinity: str = INFINITY) -> str:
        return f"{infinity})"

    def __repr__(self) -> str:
        return "Unbounded()"


@dataclass(frozen=True, eq=False, repr=False)
class Open(Bound):
    """A bound excluding its limit value."""

    value: Any
    kind: ClassVar[BoundKind] = BoundKind.OPEN

    def __post_init__(self) -> None:
        _require_value(self, self.value)

    @property
    def is_open(self) -> bool:
        return True

    @property
    def is_closed(self) -> bool:
        return False

    def with_limit_point(self) -> Closed:
        return Closed(self.value)

    def fmt_left(self, infinity: str = INFINITY) -> str:
        return f"({self.value}"

    def fmt_right(self, infinity: str = INFINITY) -> str:
        return f"{self.value})"

    def __repr__(self) -> str:
        return f"Open({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class Closed(Bound):
    """A bound including its limit value."""

    value: Any
    kind: ClassVar[BoundKind] = BoundKind.CLOSED

    def __post_init__(self) -> None:
        _require_value(self, self.value)

    @property
    def is_open(self) -> bool:
        return False

    @property
    def is_closed(self) -> bool:
        return True

    def with_limit_point(self) -> Closed:
        return self

    def fmt_left(self, infinity: str = INFINITY) -> str:
        return f"[{self.value}"

    def fmt_right(self, infinity: str = INFINITY) -> str:
        return f"{self.value}]"

    def __repr__(self) -> str:
        return f"Closed({self.value!r})"


@dataclass(frozen=True, eq=False, repr=False)
class OpenOrClosed(Bound):
    """A bound that is either open or closed, decided at runtime.

    Attributes:
        tag: ``BoundKind.OPEN`` or ``BoundKind.CLOSED``.
        value: The limit value.
    """

    tag: BoundKind
    value: Any
    kind: ClassVar[BoundKind] = BoundKind.OPEN_OR_CLOSED

    def __post_init__(self) -> None:
        object.__setattr__(self, "tag", BoundKind(self.tag))
        if self.tag not in (BoundKind.OPEN, BoundKind.CLOSED):
            msg = f"OpenOrClosed tag must be OPEN or CLOSED, got {self.tag!r}"
            raise ValueError(msg)
        _require_value(self, self.value)

    @classmethod
    def open(cls, value: Any) -> OpenOrClosed:
        return cls(BoundKind.OPEN, value)

    @classmethod
    def closed(cls, value: Any) -> OpenOrClosed:
        return cls(BoundKind.CLOSED, value)

    @classmethod
    def wrap(cls, bound: Bound) -> OpenOrClosed:
        """Re-express an open or closed bound as the dynamic union.

        Raises:
            TypeError: If *bound* is ``Unbounded``.
        """
        if isinstance(bound, OpenOrClosed):
            return bound
        if isinstance(bound, Open):
            return cls.open(bound.value)
        if isinstance(bound, Closed):
            return cls.closed(bound.value)
        msg = f"Cannot wrap {bound!r} as OpenOrClosed"
        raise TypeError(msg)

    def resolve(self) -> Open | Closed:
        """Return the concrete bound matching the current tag."""
        if self.tag is BoundKind.OPEN:
            return Open(self.value)
        return Closed(self.value)

    @property
    def is_open(self) -> bool:
        return self.tag is BoundKind.OPEN

    @property
    def is_closed(self) -> bool:
        return self.tag is BoundKind.CLOSED

    def with_limit_point(self) -> Closed:
        return Closed(self.value)

    def fmt_left(self, infinity: str = INFINITY) -> str:
        return self.resolve().fmt_left(infinity)

    def fmt_right(self, infinity: str = INFINITY) -> str:
        return self.resolve().fmt_right(infinity)

    def __repr__(self) -> str:
        return f"OpenOrClosed.{self.tag.value}({self.value!r})"


__all__ = [
    "INFINITY",
    "BoundKind",
    "Bound",
    "Unbounded",
    "Open",
    "Closed",
    "OpenOrClosed",
]
