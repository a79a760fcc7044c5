"""Debug formatting for slot objects.

Nothing here is consulted during evaluation. Slot values are never expanded,
so formatting is safe on cyclic graphs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from protoslots.core.object.models import SlotObject


def describe(obj: SlotObject) -> str:
    """Return a one-line summary of an object's shape.

    Example:
        >>> describe(point)
        'SlotObject#12(primitive=None, slots={x, proto}, parents={proto}, messages=[], native=no)'
    """
    slot_names = ", ".join(obj.slots)
    parent_names = ", ".join(obj.parents)
    messages = ", ".join(obj.messages)
    has_native = "yes" if obj.native is not None else "no"
    return (
        f"SlotObject{obj.oid}(primitive={obj.primitive!r}, slots={{{slot_names}}}, "
        f"parents={{{parent_names}}}, messages=[{messages}], native={has_native})"
    )


def snapshot(obj: SlotObject) -> dict[str, Any]:
    """Return a JSON-serializable dictionary of an object's shape."""
    return {
        "oid": obj.oid.index,
        "kind": obj.kind.name.lower(),
        "primitive": None if obj.primitive is None else repr(obj.primitive),
        "slots": list(obj.slots),
        "parents": list(obj.parents),
        "messages": list(obj.messages),
        "native": obj.native is not None,
    }
