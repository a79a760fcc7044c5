"""Inheritance resolution: breadth-first search of the parent graph.

The resolver only locates slots. Evaluating what it finds is the evaluator's
job, so the same search backs plain and parameterized dispatch.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from protoslots.core.identity import ObjectId
from protoslots.core.object import SlotObject


@dataclass(frozen=True, slots=True)
class SlotLookup:
    """A successful slot lookup.

    Attributes:
        holder: Object whose own slot matched.
        value: The object stored in that slot.
        depth: Breadth-first level of holder (0 = receiver itself).
    """

    holder: SlotObject
    value: SlotObject
    depth: int


def iter_ancestors(receiver: SlotObject) -> Iterator[tuple[SlotObject, int]]:
    """Yield each reachable ancestor once, in breadth-first order.

    Parents are enqueued in declaration order, so direct parents come before
    grandparents and earlier-declared siblings before later ones. Objects are
    visited at most once by handle, which makes cyclic and diamond-shaped
    graphs terminate. Absent parent slots are skipped.

    Yields:
        (ancestor, depth) pairs, depth starting at 1 for direct parents.
    """
    queue: deque[tuple[SlotObject | None, int]] = deque(
        (parent, 1) for parent in receiver.parent_objects()
    )
    visited: set[ObjectId] = set()

    while queue:
        current, depth = queue.popleft()
        if current is None or current.oid in visited:
            continue
        visited.add(current.oid)
        yield current, depth
        queue.extend((parent, depth + 1) for parent in current.parent_objects())


def find_slot(receiver: SlotObject, name: str) -> SlotLookup | None:
    """Locate slot `name` on receiver or its nearest ancestor.

    Args:
        receiver: Object the message is sent to.
        name: Slot name to find.

    Returns:
        SlotLookup for the first match, or None if no reachable object
        holds the slot.
    """
    value = receiver.slots.get(name)
    if value is not None:
        return SlotLookup(holder=receiver, value=value, depth=0)

    for ancestor, depth in iter_ancestors(receiver):
        value = ancestor.slots.get(name)
        if value is not None:
            return SlotLookup(holder=ancestor, value=value, depth=depth)
    return None
