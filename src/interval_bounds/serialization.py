"""Serialization of bounds, intervals and partitions using Pydantic.

Each core type has a frozen model mirroring its read-only accessors.
Decoding always goes through the validated constructors, so a payload
describing decreasing bounds or ill-formed breakpoints is rejected with the
same errors the constructors raise.

Example::

    from interval_bounds import Interval
    from interval_bounds.serialization import dumps, loads

    text = dumps(Interval.lcro(0.0, 1.0))
    # '{"type":"interval","left":{"type":"bound","kind":"closed","value":0.0},...}'
    loads(text) == Interval.lcro(0.0, 1.0)    # True
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from .bounds import Bound, BoundKind, Closed, Open, OpenOrClosed, Unbounded
from .config import SerializationConfig
from .exceptions import SerializationError
from .interval import Interval
from .partitions import Declarative, Uniform

__all__ = [
    "BoundModel",
    "IntervalModel",
    "UniformModel",
    "DeclarativeModel",
    "to_model",
    "from_model",
    "dumps",
    "loads",
]


class BoundModel(BaseModel):
    """One bound: its kind, its value and, for the dynamic kind, its tag."""

    model_config = ConfigDict(frozen=True)

    type: Literal["bound"] = "bound"
    kind: BoundKind
    value: Any = None
    tag: Optional[BoundKind] = None

    @model_validator(mode="after")
    def _check_shape(self) -> BoundModel:
        if self.kind is BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError("an unbounded bound must not carry a value")
        elif self.value is None:
            raise ValueError(f"a {self.kind.value} bound requires a value")

        if self.kind is BoundKind.OPEN_OR_CLOSED:
            if self.tag not in (BoundKind.OPEN, BoundKind.CLOSED):
                raise ValueError("an open_or_closed bound needs tag 'open' or 'closed'")
        elif self.tag is not None:
            raise ValueError("only open_or_closed bounds carry a tag")
        return self

    @classmethod
    def from_bound(cls, bound: Bound) -> BoundModel:
        tag = bound.tag if isinstance(bound, OpenOrClosed) else None
        return cls(kind=bound.kind, value=bound.value, tag=tag)

    def to_bound(self) -> Bound:
        if self.kind is BoundKind.UNBOUNDED:
            return Unbounded()
        if self.kind is BoundKind.OPEN:
            return Open(self.value)
        if self.kind is BoundKind.CLOSED:
            return Closed(self.value)
        return OpenOrClosed(self.tag, self.value)


class IntervalModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["interval"] = "interval"
    left: BoundModel
    right: BoundModel


class UniformModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["uniform"] = "uniform"
    count: int
    left: Any
    right: Any


class DeclarativeModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["declarative"] = "declarative"
    breakpoints: List[Any]


AnyModel = Union[BoundModel, IntervalModel, UniformModel, DeclarativeModel]
Serializable = Union[Bound, Interval, Uniform, Declarative]

_adapter: TypeAdapter[AnyModel] = TypeAdapter(
    Annotated[AnyModel, Field(discriminator="type")]
)


def to_model(obj: Serializable) -> AnyModel:
    """Build the model describing *obj*."""
    if isinstance(obj, Bound):
        return BoundModel.from_bound(obj)
    if isinstance(obj, Interval):
        return IntervalModel(
            left=BoundModel.from_bound(obj.left),
            right=BoundModel.from_bound(obj.right),
        )
    if isinstance(obj, Uniform):
        return UniformModel(count=obj.count, left=obj.left, right=obj.right)
    if isinstance(obj, Declarative):
        return DeclarativeModel(breakpoints=list(obj.breakpoints))
    msg = f"Cannot serialize object of type {type(obj).__name__}"
    raise TypeError(msg)


def from_model(model: AnyModel) -> Serializable:
    """Rebuild the object described by *model* through validated constructors.

    Raises:
        DecreasingBoundsError: If an interval's bounds are decreasing.
        PartitionError: If a partition's parameters are ill-formed.
        SerializationError: If an interval's bound values cannot be compared.
    """
    if isinstance(model, BoundModel):
        return model.to_bound()
    if isinstance(model, IntervalModel):
        left, right = model.left.to_bound(), model.right.to_bound()
        try:
            return Interval.new(left, right)
        except TypeError as e:
            raise SerializationError(
                "Interval bound values cannot be compared",
                context={"left": repr(left.value), "right": repr(right.value)},
                suggestions=["Use values of one ordered type for both bounds"],
            ) from e
    if isinstance(model, UniformModel):
        return Uniform(model.count, model.left, model.right)
    return Declarative.new(model.breakpoints)


def dumps(obj: Serializable, config: SerializationConfig | None = None) -> str:
    """Serialize *obj* to JSON.

    Raises:
        SerializationError: If a value has no JSON representation.
    """
    indent = config.indent if config else None
    try:
        return to_model(obj).model_dump_json(indent=indent, exclude_none=True)
    except PydanticSerializationError as e:
        raise SerializationError(
            "Value cannot be represented as JSON",
            context={"object": repr(obj)},
            suggestions=["Use int, float or str values for serialized intervals"],
        ) from e


def loads(text: Union[str, bytes]) -> Serializable:
    """Deserialize JSON produced by :func:`dumps`.

    Raises:
        SerializationError: If the payload does not describe a known object.
        DecreasingBoundsError: If it describes decreasing interval bounds.
        PartitionError: If it describes an ill-formed partition.
    """
    try:
        model = _adapter.validate_json(text)
    except PydanticValidationError as e:
        raise SerializationError(
            "Invalid serialized payload",
            context={"errors": e.error_count(), "detail": str(e)},
        ) from e
    return from_model(model)
