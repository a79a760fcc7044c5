"""Slot object functionality: the node type, its native hook and formatting."""

from protoslots.core.object.formatting import describe, snapshot
from protoslots.core.object.models import ObjectKind, SlotObject
from protoslots.core.object.native import (
    FunctionComputation,
    NativeComputation,
    as_native,
    native,
)

__all__ = [
    "SlotObject",
    "ObjectKind",
    "NativeComputation",
    "FunctionComputation",
    "native",
    "as_native",
    "describe",
    "snapshot",
]
