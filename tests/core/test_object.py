"""Tests for the slot object model.

Critical Invariants:
- Copies own their containers but share referenced objects
- Every object and every copy has a distinct handle
- Kind follows the fixed priority primitive > native > messages > plain
- Parent markers only attach to present slots and are never revalidated
"""

import copy

from protoslots import ObjectKind, SlotObject
from protoslots.core.object import FunctionComputation
from protoslots.lib import box


def test_new_object_is_empty_and_plain():
    obj = SlotObject()
    assert obj.slots == {}
    assert obj.parents == []
    assert obj.messages == []
    assert obj.primitive is None
    assert obj.native is None
    assert obj.kind is ObjectKind.PLAIN


def test_objects_get_distinct_handles():
    first, second = SlotObject(), SlotObject()
    assert first.oid != second.oid


def test_equality_is_identity():
    first, second = SlotObject(primitive=1), SlotObject(primitive=1)
    assert first != second
    assert first == first
    assert len({first, second}) == 2


# Copy independence


def test_copy_has_new_containers_and_handle():
    source = SlotObject(primitive=3, messages=["a"])
    source.assign_parent_slot("p", SlotObject())

    clone = source.copy()

    assert clone is not source
    assert clone.oid != source.oid
    assert clone.slots is not source.slots
    assert clone.parents is not source.parents
    assert clone.messages is not source.messages
    assert clone.slots == source.slots
    assert clone.parents == source.parents
    assert clone.messages == source.messages
    assert clone.primitive == source.primitive


def test_slot_added_on_copy_does_not_appear_on_source():
    source = SlotObject()
    clone = source.copy()

    clone.assign_slot("extra", SlotObject())
    source.assign_slot("other", SlotObject())

    assert "extra" not in source.slots
    assert "other" not in clone.slots


def test_copy_parents_and_messages_are_independent():
    source = SlotObject(messages=["m"])
    source.assign_parent_slot("p", SlotObject())
    clone = source.copy()

    clone.assign_parent_slot("q", SlotObject())
    clone.messages.append("n")

    assert source.parents == ["p"]
    assert source.messages == ["m"]


def test_copy_shares_referenced_sub_objects():
    shared = SlotObject()
    source = SlotObject()
    source.assign_slot("shared", shared)
    clone = source.copy()

    clone.slots["shared"].assign_slot("marker", box(1))

    assert clone.slots["shared"] is shared
    assert "marker" in source.slots["shared"].slots


def test_copy_shares_native_computation():
    obj = SlotObject(native=lambda receiver, parameter: SlotObject())
    assert obj.copy().native is obj.native


def test_copy_module_uses_shallow_clone():
    source = SlotObject(primitive="v")
    clone = copy.copy(source)
    assert clone.primitive == "v"
    assert clone.oid != source.oid


# Kind priority


def test_kind_priority_order():
    fn = lambda receiver, parameter: SlotObject()  # noqa: E731
    assert SlotObject(primitive=1, native=fn, messages=["m"]).kind is ObjectKind.PRIMITIVE
    assert SlotObject(native=fn, messages=["m"]).kind is ObjectKind.NATIVE
    assert SlotObject(messages=["m"]).kind is ObjectKind.CHAIN


def test_falsy_primitive_still_counts_as_primitive():
    assert SlotObject(primitive=0).kind is ObjectKind.PRIMITIVE
    assert SlotObject(primitive="").kind is ObjectKind.PRIMITIVE
    assert SlotObject(primitive=False).kind is ObjectKind.PRIMITIVE


def test_bare_callable_is_wrapped():
    def compute(receiver, parameter):
        return SlotObject()

    obj = SlotObject(native=compute)
    assert isinstance(obj.native, FunctionComputation)
    assert obj.native.name == "compute"


# Mutation API


def test_assign_slot_overwrites():
    obj = SlotObject()
    first, second = SlotObject(), SlotObject()
    obj.assign_slot("x", first)
    obj.assign_slot("x", second)
    assert obj.slots["x"] is second


def test_make_parent_requires_existing_slot():
    obj = SlotObject()
    obj.make_parent("missing")
    assert obj.parents == []


def test_make_parent_does_not_duplicate():
    obj = SlotObject()
    obj.assign_slot("p", SlotObject())
    obj.make_parent("p")
    obj.make_parent("p")
    assert obj.parents == ["p"]


def test_assign_parent_slot_preserves_declaration_order():
    obj = SlotObject()
    obj.assign_parent_slot("b", SlotObject())
    obj.assign_parent_slot("a", SlotObject())
    assert obj.parents == ["b", "a"]


def test_reassigning_parent_slot_redirects_edge():
    """Parent markers are not revalidated when the slot changes."""
    obj = SlotObject()
    old, new = SlotObject(), SlotObject()
    obj.assign_parent_slot("p", old)

    obj.assign_slot("p", new)

    assert obj.parents == ["p"]
    assert obj.parent_objects() == [new]
