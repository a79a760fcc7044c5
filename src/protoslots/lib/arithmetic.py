"""Built-in arithmetic and comparison computations.

Operators are installed as slots whose objects carry a native computation.
Each operator object keeps a `receiver` slot pointing back at the number it
was installed on, so the native side can see both operands when dispatched
with a parameter.

Usage:
    five = box(5)
    install_arithmetic(five)

    eight = dispatch_with_parameter(five, "+", box(3))
    assert eight.primitive == 8
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

from protoslots.core.object import SlotObject, native

RECEIVER_SLOT = "receiver"

OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "<": operator.lt,
    "==": operator.eq,
}


def box(value: Any) -> SlotObject:
    """Wrap a scalar in a primitive object.

    Raises:
        ValueError: If value is None, which cannot be boxed.
    """
    if value is None:
        raise ValueError("None cannot be boxed; it marks an absent primitive")
    return SlotObject(primitive=value)


def _require_operand(parameter: SlotObject | None, name: str) -> Any:
    if parameter is None or parameter.primitive is None:
        raise TypeError(f"{name} requires a primitive parameter")
    return parameter.primitive


@native
def increment(receiver: SlotObject, parameter: SlotObject | None) -> SlotObject:
    return box(_require_operand(parameter, "increment") + 1)


def make_increment() -> SlotObject:
    """Object computing `parameter.primitive + 1`."""
    return SlotObject(native=increment)


def make_operator(receiver: SlotObject, op: Callable[[Any, Any], Any]) -> SlotObject:
    """Build a binary operator object bound to receiver as left operand."""
    symbol = getattr(op, "__name__", "operator")

    @native
    def apply(self: SlotObject, parameter: SlotObject | None) -> SlotObject:
        left = self.slots.get(RECEIVER_SLOT)
        if left is None or left.primitive is None:
            raise TypeError(f"{symbol} requires a primitive receiver")
        return box(op(left.primitive, _require_operand(parameter, symbol)))

    operator_object = SlotObject(native=apply)
    operator_object.assign_slot(RECEIVER_SLOT, receiver)
    return operator_object


def install_operator(receiver: SlotObject, name: str, op: Callable[[Any, Any], Any]) -> None:
    """Install binary operator `op` on receiver under slot `name`."""
    receiver.assign_slot(name, make_operator(receiver, op))


def install_arithmetic(receiver: SlotObject) -> SlotObject:
    """Install every operator in OPERATORS on receiver and return it."""
    for name, op in OPERATORS.items():
        install_operator(receiver, name, op)
    return receiver
