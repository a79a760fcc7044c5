"""Core functionalities: the object model and its identity handles.

Architecture Note:
    core/ contains the data model and stateless helpers. Evaluation lives in
    runtime/, which holds configuration and tracing state.
"""

from protoslots.core.identity import ObjectId, ObjectIdAllocator, allocate_object_id
from protoslots.core.object import (
    FunctionComputation,
    NativeComputation,
    ObjectKind,
    SlotObject,
    as_native,
    describe,
    native,
    snapshot,
)
from protoslots.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Identity
    "ObjectId",
    "ObjectIdAllocator",
    "allocate_object_id",
    # Object
    "SlotObject",
    "ObjectKind",
    "NativeComputation",
    "FunctionComputation",
    "native",
    "as_native",
    "describe",
    "snapshot",
]
