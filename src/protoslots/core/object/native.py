"""Native computation hook.

A native computation is the only way built-in behaviour (arithmetic,
comparisons, I/O bridges) enters the object model. The evaluator depends on
the NativeComputation protocol alone, never on a concrete callable type.

Usage:
    @native
    def increment(receiver, parameter):
        return SlotObject(primitive=parameter.primitive + 1)

    inc = SlotObject(native=increment)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from protoslots.core.object.models import SlotObject


@runtime_checkable
class NativeComputation(Protocol):
    """Protocol for computations attached to an object.

    Implementations may read the receiver's slots but interact with the rest
    of the graph only through the object they return.
    """

    def compute(self, receiver: SlotObject, parameter: SlotObject | None) -> SlotObject:
        """Produce the evaluation result for `receiver`.

        Args:
            receiver: The object being evaluated.
            parameter: Object bound to the receiver's parameter slot, or None.

        Returns:
            A new SlotObject.
        """
        ...


@dataclass(frozen=True, slots=True)
class FunctionComputation:
    """Adapts a plain `(receiver, parameter) -> SlotObject` callable."""

    fn: Callable[[SlotObject, SlotObject | None], SlotObject]

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", type(self.fn).__name__)

    def compute(self, receiver: SlotObject, parameter: SlotObject | None) -> SlotObject:
        return self.fn(receiver, parameter)


def native(
    fn: Callable[[SlotObject, SlotObject | None], SlotObject],
) -> FunctionComputation:
    """Decorator turning a function into a NativeComputation."""
    return FunctionComputation(fn)


def as_native(
    value: NativeComputation | Callable[[SlotObject, SlotObject | None], SlotObject],
) -> NativeComputation:
    """Return `value` as a NativeComputation, wrapping bare callables.

    Raises:
        TypeError: If value is neither a NativeComputation nor callable.
    """
    if isinstance(value, NativeComputation):
        return value
    if callable(value):
        return FunctionComputation(value)
    raise TypeError(f"Expected NativeComputation or callable, got {type(value)}")
