"""Slot object models.

Usage:
    point = SlotObject()
    point.assign_slot("x", SlotObject(primitive=3))
    point.assign_parent_slot("proto", point_proto)

    clone = point.copy()
    clone.assign_slot("y", SlotObject(primitive=4))  # point is unchanged
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from protoslots.core.identity import ObjectId, allocate_object_id
from protoslots.core.object.native import NativeComputation, as_native
from protoslots.core.types import Copy

logger = logging.getLogger(__name__)


class ObjectKind(Enum):
    """Evaluation case governing an object, in priority order."""

    PRIMITIVE = auto()  # Boxed value, evaluates to a copy of itself
    NATIVE = auto()  # Native computation, evaluates to whatever it returns
    CHAIN = auto()  # Message chain, evaluates by sequential self-dispatch
    PLAIN = auto()  # Nothing to do, evaluates to itself


@dataclass(eq=False, repr=False)
class SlotObject:
    """A node in the prototype graph.

    Slots hold shared references: the same object may sit in several slots,
    in several objects, or in a cycle. Equality and hashing are by identity.

    Attributes:
        primitive: Immutable payload. None means absent.
        native: Native computation. Bare callables are wrapped on construction.
        messages: Names sent to the object, in order, when it is evaluated.
        slots: Name -> object mapping, in insertion order.
        parents: Slot names searched on lookup miss, in declaration order.
        oid: Stable handle, fresh for every object and every copy.
    """

    primitive: Any = None
    native: NativeComputation | Callable[..., SlotObject] | None = None
    messages: list[str] = field(default_factory=list)
    slots: dict[str, SlotObject] = field(default_factory=dict)
    parents: list[str] = field(default_factory=list)
    oid: ObjectId = field(default_factory=allocate_object_id)

    def __post_init__(self) -> None:
        if self.native is not None:
            self.native = as_native(self.native)

    def __repr__(self) -> str:
        from protoslots.core.object.formatting import describe

        return describe(self)

    def __copy__(self) -> SlotObject:
        return self.copy()

    @property
    def kind(self) -> ObjectKind:
        """The case that governs evaluation.

        Fields are checked in fixed priority: primitive, native, messages.
        An object may carry all of them; only the first present one counts.
        """
        if self.primitive is not None:
            return ObjectKind.PRIMITIVE
        if self.native is not None:
            return ObjectKind.NATIVE
        if self.messages:
            return ObjectKind.CHAIN
        return ObjectKind.PLAIN

    def has_slot(self, name: str) -> bool:
        """Check if slot `name` holds an object."""
        return self.slots.get(name) is not None

    def parent_objects(self) -> list[SlotObject | None]:
        """Objects currently bound to the parent slots, in declaration order.

        Entries are None where a parent slot was later reassigned to None.
        """
        return [self.slots.get(name) for name in self.parents]

    def copy(self) -> Copy[SlotObject]:
        """Return a shallow clone with its own containers and a new handle.

        The clone gets new `slots`, `parents` and `messages` containers.
        Referenced objects, the primitive payload and the native computation
        are shared with the source.
        """
        return SlotObject(
            primitive=self.primitive,
            native=self.native,
            messages=list(self.messages),
            slots=dict(self.slots),
            parents=list(self.parents),
        )

    # Mutation API

    def assign_slot(self, name: str, value: SlotObject) -> None:
        """Set or overwrite slot `name`.

        Reassigning a slot that is marked as a parent silently redirects the
        inheritance edge to the new value.
        """
        self.slots[name] = value

    def make_parent(self, name: str) -> None:
        """Mark slot `name` as a parent.

        No-op if the slot is absent or already a parent.
        """
        if not self.has_slot(name):
            logger.debug("Ignoring parent marker for missing slot %r on %s", name, self.oid)
            return
        if name not in self.parents:
            self.parents.append(name)

    def assign_parent_slot(self, name: str, value: SlotObject) -> None:
        """Assign slot `name` and mark it as a parent in one step."""
        self.assign_slot(name, value)
        self.make_parent(name)
