"""Evaluation and message dispatch.

Usage:
    evaluator = Evaluator()

    five = SlotObject(primitive=5)
    five.assign_slot("increment", make_increment())
    six = evaluator.dispatch_with_parameter(five, "increment", five)

    # Message chains thread each result into the next send
    program = SlotObject(messages=["first", "second"])
    result = evaluator.evaluate(program)  # raises MessageNotFoundError on a miss

    # Module-level helpers use a shared default evaluator
    from protoslots import evaluate, dispatch
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from protoslots.config import EvaluatorSettings
from protoslots.core.object import ObjectKind, SlotObject
from protoslots.runtime.resolver import SlotLookup, find_slot
from protoslots.tracing import DispatchRecord, TraceStore

logger = logging.getLogger(__name__)


class ProtoSlotsError(Exception):
    """Base class for evaluation failures."""

    pass


class MessageNotFoundError(ProtoSlotsError, LookupError):
    """Raised when a message chain sends a name no reachable object holds."""

    def __init__(self, message_name: str):
        super().__init__(f"Message {message_name!r} not found")
        self.message_name = message_name


class EvaluationDepthError(ProtoSlotsError, RecursionError):
    """Raised when nested evaluation exceeds the configured max_depth."""

    def __init__(self, max_depth: int):
        super().__init__(f"Evaluation exceeded max_depth={max_depth}")
        self.max_depth = max_depth


class Evaluator:
    """Evaluates slot objects and dispatches messages.

    Holds configuration, an optional trace store and a nesting counter.
    Not thread-safe: serialize graph mutation and evaluation externally, or
    use one evaluator per thread over disjoint graphs.

    Args:
        settings: Evaluator settings. Defaults to EvaluatorSettings() which
            reads PROTOSLOTS_* environment variables.
        trace: Store receiving one DispatchRecord per dispatch.
    """

    def __init__(
        self,
        settings: EvaluatorSettings | None = None,
        trace: TraceStore | None = None,
    ) -> None:
        self._settings = settings or EvaluatorSettings()
        self._trace = trace
        self._depth = 0
        self._sequence = 0

    @property
    def settings(self) -> EvaluatorSettings:
        return self._settings

    @property
    def trace(self) -> TraceStore | None:
        return self._trace

    @contextmanager
    def _nested(self) -> Iterator[None]:
        max_depth = self._settings.max_depth
        if max_depth is not None and self._depth >= max_depth:
            raise EvaluationDepthError(max_depth)
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1

    def evaluate(self, obj: SlotObject) -> SlotObject:
        """Evaluate an object according to its kind.

        - PRIMITIVE: a copy carrying the same value.
        - NATIVE: whatever the native computation returns, given the object
          and its parameter slot (None if unset).
        - CHAIN: each message is dispatched to the result of the previous
          one, starting from a copy of the object; the last result is returned.
        - PLAIN: the object itself.

        Raises:
            MessageNotFoundError: A chain message matched nothing. No partial
                result is produced.
            EvaluationDepthError: Nesting exceeded settings.max_depth.
            TypeError: A native computation returned a non-SlotObject.
        """
        with self._nested():
            kind = obj.kind
            if kind is ObjectKind.PRIMITIVE:
                return obj.copy()
            if kind is ObjectKind.NATIVE:
                return self._compute(obj)
            if kind is ObjectKind.CHAIN:
                return self._run_chain(obj)
            return obj

    def _compute(self, obj: SlotObject) -> SlotObject:
        assert obj.native is not None
        parameter = obj.slots.get(self._settings.parameter_slot)
        result = obj.native.compute(obj, parameter)
        if not isinstance(result, SlotObject):
            raise TypeError(
                f"Native computation on {obj.oid} returned {type(result).__name__}, "
                f"expected SlotObject"
            )
        return result

    def _run_chain(self, obj: SlotObject) -> SlotObject:
        current = obj.copy()
        for name in obj.messages:
            result = self.dispatch(current, name)
            if result is None:
                logger.debug(
                    "Message %r not found from %s in chain of %s", name, current.oid, obj.oid
                )
                raise MessageNotFoundError(name)
            current = result
        return current

    def dispatch(self, receiver: SlotObject, name: str) -> SlotObject | None:
        """Send message `name` to receiver.

        Looks up the receiver's own slot first, then searches ancestors
        breadth-first. The matching slot's object is evaluated.

        Returns:
            The evaluation result, or None if no reachable object holds
            the slot.
        """
        lookup = find_slot(receiver, name)
        if lookup is None:
            self._record(receiver, name, None, None, with_parameter=False)
            return None
        result = self.evaluate(lookup.value)
        self._record(receiver, name, lookup, result, with_parameter=False)
        return result

    def dispatch_with_parameter(
        self, receiver: SlotObject, name: str, parameter: SlotObject
    ) -> SlotObject | None:
        """Send message `name` to receiver with a parameter.

        Same search as dispatch(), but the matching slot's object is copied,
        the copy's parameter slot is bound to `parameter`, and the copy is
        evaluated. The object stored in the slot is never modified.

        Returns:
            The evaluation result, or None if no reachable object holds
            the slot.
        """
        lookup = find_slot(receiver, name)
        if lookup is None:
            self._record(receiver, name, None, None, with_parameter=True)
            return None
        target = lookup.value.copy()
        target.assign_slot(self._settings.parameter_slot, parameter)
        result = self.evaluate(target)
        self._record(receiver, name, lookup, result, with_parameter=True)
        return result

    def _record(
        self,
        receiver: SlotObject,
        name: str,
        lookup: SlotLookup | None,
        result: SlotObject | None,
        *,
        with_parameter: bool,
    ) -> None:
        if self._trace is None:
            return
        self._sequence += 1
        self._trace.record(
            DispatchRecord(
                sequence=self._sequence,
                receiver=receiver.oid.index,
                message=name,
                holder=lookup.holder.oid.index if lookup else None,
                depth=lookup.depth if lookup else None,
                with_parameter=with_parameter,
                result=result.oid.index if result is not None else None,
            )
        )


_default_evaluator: Evaluator | None = None


def get_default_evaluator() -> Evaluator:
    """Get the shared evaluator used by the module-level helpers.

    Created on first use from environment settings.
    """
    global _default_evaluator
    if _default_evaluator is None:
        _default_evaluator = Evaluator()
    return _default_evaluator


def set_default_evaluator(evaluator: Evaluator | None) -> None:
    """Replace the shared evaluator. None resets to a lazily-created default."""
    global _default_evaluator
    _default_evaluator = evaluator


def evaluate(obj: SlotObject) -> SlotObject:
    """Evaluate `obj` with the default evaluator."""
    return get_default_evaluator().evaluate(obj)


def dispatch(receiver: SlotObject, name: str) -> SlotObject | None:
    """Send `name` to receiver with the default evaluator."""
    return get_default_evaluator().dispatch(receiver, name)


def dispatch_with_parameter(
    receiver: SlotObject, name: str, parameter: SlotObject
) -> SlotObject | None:
    """Send `name` with a parameter to receiver with the default evaluator."""
    return get_default_evaluator().dispatch_with_parameter(receiver, name, parameter)
